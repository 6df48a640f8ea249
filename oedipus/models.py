"""Core data models shared across oedipus components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import AggregateModuleError


class TypeKind(str, Enum):
    """Broad category of a type as reported by the metadata provider."""

    CLASS = "class"
    INTERFACE = "interface"
    STRUCT = "struct"
    ENUM = "enum"
    DELEGATE = "delegate"
    OTHER = "other"


@dataclass(frozen=True)
class TypeDescriptor:
    """Identity, visibility and kind of one type inside a module."""

    full_name: str
    name: str
    namespace: Optional[str]
    is_public: bool = True
    kind: TypeKind = TypeKind.CLASS
    is_generic_definition: bool = False


@dataclass(frozen=True)
class ModuleUnit:
    """One compiled module and the full set of types it contains."""

    path: Path
    types: Tuple[TypeDescriptor, ...] = ()


@dataclass(frozen=True)
class NamespaceGroup:
    """A namespace and its documentable types."""

    namespace: str
    types: Tuple[TypeDescriptor, ...]


@dataclass(frozen=True)
class RenderedDocument:
    """A document written during a run."""

    identifier: str
    path: Path


@dataclass(frozen=True)
class ModuleFailure:
    """A module that could not be rendered, with the reason."""

    path: Path
    message: str


@dataclass
class RunResult:
    """Outcome of a full regeneration of the documentation tree."""

    output_dir: Path
    root_document: Path
    modules: List[str] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failures: List[ModuleFailure] = field(default_factory=list)
    documents: List[RenderedDocument] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise AggregateModuleError when any module failed."""
        if self.failures:
            raise AggregateModuleError(self.failures)
