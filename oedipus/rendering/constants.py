"""Shared constants for reStructuredText document rendering."""

from __future__ import annotations

# Literal tab + space used by the Sphinx/Breathe projects this output feeds.
INDENT = "\t "

DEFAULT_MAXDEPTH = 2
DEFAULT_SUBDIR = "apidocs"

ROOT_TITLE = "API"
# The root index keeps its fixed four-character underline.
ROOT_UNDERLINE = "=" * 4

DEFAULT_DESCRIPTION = (
    "The API documentation has been generated using "
    "`Oedipus <https://github.com/Jumpercables/Oedipus>`_ and built using the "
    "`Breathe <http://breathe.readthedocs.org/en/latest/>`_ extension for "
    "`Sphinx <http://sphinx-doc.org/index.html>`_."
)

NAMESPACE_TEMPLATE = "namespace.rst.j2"
MODULE_TEMPLATE = "module.rst.j2"
ROOT_TEMPLATE = "root.rst.j2"


__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_MAXDEPTH",
    "DEFAULT_SUBDIR",
    "INDENT",
    "MODULE_TEMPLATE",
    "NAMESPACE_TEMPLATE",
    "ROOT_TEMPLATE",
    "ROOT_TITLE",
    "ROOT_UNDERLINE",
]
