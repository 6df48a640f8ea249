"""reStructuredText rendering for the API documentation tree."""

from .renderer import DocumentTemplates, ModuleRenderer, NamespaceRenderer, RootIndexBuilder

__all__ = [
    "DocumentTemplates",
    "ModuleRenderer",
    "NamespaceRenderer",
    "RootIndexBuilder",
]
