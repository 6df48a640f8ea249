"""Exception types raised while building the API documentation tree."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .models import ModuleFailure


class OedipusError(RuntimeError):
    """Base class for oedipus failures."""


class ModuleError(OedipusError):
    """A failure scoped to a single module; the run continues without it."""

    def __init__(self, module_path: Path | str, message: str) -> None:
        super().__init__(message)
        self.module_path = Path(module_path)


class MetadataLoadError(ModuleError):
    """Raised when a module's type metadata cannot be obtained."""


class SlugCollisionError(ModuleError):
    """Raised when two names case-fold to the same file slug."""

    def __init__(self, module_path: Path | str, slug: str, first: str, second: str) -> None:
        super().__init__(
            module_path,
            f"'{second}' and '{first}' both map to the slug '{slug}'",
        )
        self.slug = slug
        self.first = first
        self.second = second


class InvalidModuleName(OedipusError):
    """Raised when no display name can be derived from a module file name."""


class AggregateModuleError(OedipusError):
    """Collects every module failure of a run."""

    def __init__(self, failures: Sequence["ModuleFailure"]) -> None:
        self.failures = list(failures)
        count = len(self.failures)
        noun = "module" if count == 1 else "modules"
        super().__init__(f"{count} {noun} failed to render")


__all__ = [
    "AggregateModuleError",
    "InvalidModuleName",
    "MetadataLoadError",
    "ModuleError",
    "OedipusError",
    "SlugCollisionError",
]
