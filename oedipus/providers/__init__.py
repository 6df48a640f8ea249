"""Metadata provider implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Callable, Dict, Iterable, Sequence

from .base import MetadataProvider
from .manifest import ManifestMetadataProvider, ManifestResolver

_ENTRY_POINT_GROUP = "oedipus.providers"

ProviderFactory = Callable[[ManifestResolver], MetadataProvider]

_BUILTIN_FACTORIES: Dict[str, ProviderFactory] = {
    "manifest": ManifestMetadataProvider,
}


def discover_provider(
    name: str = "manifest", *, search_paths: Sequence[Path] | None = None
) -> MetadataProvider:
    """Instantiate the named provider with a resolver over ``search_paths``."""
    factories = available_providers()
    key = name.lower()
    factory = factories.get(key)
    if factory is None:
        known = ", ".join(sorted(factories))
        raise ValueError(f"Unknown metadata provider '{name}' (available: {known})")

    instance = factory(ManifestResolver(search_paths))
    if not isinstance(instance, MetadataProvider):
        raise TypeError(f"Provider factory for '{name}' did not return a MetadataProvider instance")
    return instance


def available_providers() -> Dict[str, ProviderFactory]:
    """Return built-in providers plus those registered as entry points."""
    factories: Dict[str, ProviderFactory] = dict(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        key = entry.name.lower()
        if key in factories:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - third-party plugin
            raise RuntimeError(f"Failed to load provider entry point '{entry.name}': {exc}") from exc
        factories[key] = loaded
    return factories


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ManifestMetadataProvider",
    "ManifestResolver",
    "MetadataProvider",
    "available_providers",
    "discover_provider",
]
