"""Base classes for metadata provider plugins."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import ModuleUnit


class MetadataProvider(ABC):
    """Contract for providers that turn a module reference into type metadata."""

    def exists(self, module_path: Path) -> bool:
        """Return True when the module's backing file exists."""
        return Path(module_path).is_file()

    @abstractmethod
    def load(self, module_path: Path) -> ModuleUnit:
        """Return the module's type descriptors or raise MetadataLoadError."""
