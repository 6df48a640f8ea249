"""Generate Sphinx/Breathe API reference trees from compiled module metadata."""

from .catalog import TypeCatalog
from .models import ModuleUnit, NamespaceGroup, RunResult, TypeDescriptor, TypeKind
from .orchestrator import Orchestrator

__version__ = "0.1.0"

__all__ = [
    "ModuleUnit",
    "NamespaceGroup",
    "Orchestrator",
    "RunResult",
    "TypeCatalog",
    "TypeDescriptor",
    "TypeKind",
]
