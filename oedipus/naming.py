"""File and directory naming derived from module and namespace identifiers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from .errors import InvalidModuleName, SlugCollisionError
from .logging import get_logger

COLLISION_POLICIES: tuple[str, ...] = ("error", "overwrite")

_logger = get_logger("naming")


def module_display_name(path: Path | str) -> str:
    """Return the module file name without its final extension."""
    name = Path(path).name
    stem, dot, _ = name.rpartition(".")
    display = stem if dot else name
    if not display.strip():
        raise InvalidModuleName(f"Cannot derive a module name from '{path}'")
    return display


def module_slug(path: Path | str) -> str:
    return module_display_name(path).lower()


def namespace_slug(namespace: str) -> str:
    return namespace.lower()


def directive_name(full_name: str) -> str:
    """Rewrite a dotted type name into the ``::`` form doxygen expects."""
    return full_name.replace(".", "::")


def underline(title: str) -> str:
    """Return the section underline used for module and namespace titles."""
    return "=" * (len(title) + 1)


class SlugRegistry:
    """Tracks the slugs claimed within one scope and applies the collision policy."""

    def __init__(self, scope: str, policy: str = "error") -> None:
        if policy not in COLLISION_POLICIES:
            raise ValueError(f"Unknown collision policy '{policy}'")
        self.scope = scope
        self.policy = policy
        self._claims: Dict[str, str] = {}

    def claim(self, slug: str, name: str, module_path: Path | str) -> None:
        """Record ``name`` as the owner of ``slug``; re-claiming by the same name is a no-op."""
        existing = self._claims.get(slug)
        if existing is not None and existing != name:
            if self.policy == "error":
                raise SlugCollisionError(module_path, slug, existing, name)
            _logger.warning(
                "%s: '%s' overwrites '%s' at slug '%s'", self.scope, name, existing, slug
            )
        self._claims[slug] = name

    def __contains__(self, slug: object) -> bool:
        return slug in self._claims


__all__ = [
    "COLLISION_POLICIES",
    "SlugRegistry",
    "directive_name",
    "module_display_name",
    "module_slug",
    "namespace_slug",
    "underline",
]
