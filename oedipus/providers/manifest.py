"""Metadata provider backed by YAML/JSON type snapshots."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from ..errors import MetadataLoadError
from ..logging import get_logger
from ..models import ModuleUnit, TypeDescriptor, TypeKind
from .base import MetadataProvider

MANIFEST_SUFFIXES: tuple[str, ...] = (".yml", ".yaml", ".json")


class ManifestResolver:
    """Locates the metadata snapshot that describes a module file."""

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self.search_paths = [Path(path) for path in search_paths or []]

    def candidates(self, module_path: Path) -> List[Path]:
        module_path = Path(module_path)
        if module_path.suffix.lower() in MANIFEST_SUFFIXES:
            return [module_path]
        names = [module_path.name + suffix for suffix in MANIFEST_SUFFIXES]
        found = [module_path.with_name(name) for name in names]
        for directory in self.search_paths:
            found.extend(directory / name for name in names)
        return found

    def resolve(self, module_path: Path) -> Optional[Path]:
        for candidate in self.candidates(module_path):
            if candidate.is_file():
                return candidate
        return None


class ManifestMetadataProvider(MetadataProvider):
    """Reads the ``types`` list of a module snapshot.

    ``Acme.Core.dll`` is described by ``Acme.Core.dll.yml`` (or ``.yaml``,
    ``.json``) beside it or in one of the resolver's search paths::

        types:
          - full_name: Acme.Core.Widgets.Button
          - full_name: Acme.Core.Widgets.IWidget
            kind: interface
          - full_name: Acme.Core.Widgets.Cache`1
            name: Cache`1
            generic_definition: true
    """

    def __init__(self, resolver: ManifestResolver | None = None) -> None:
        self.resolver = resolver or ManifestResolver()
        self.logger = get_logger("providers.manifest")

    def load(self, module_path: Path) -> ModuleUnit:
        module_path = Path(module_path)
        manifest = self.resolver.resolve(module_path)
        if manifest is None:
            tried = ", ".join(str(path) for path in self.resolver.candidates(module_path))
            raise MetadataLoadError(module_path, f"No type metadata found for {module_path.name} (tried {tried})")

        self.logger.debug("Reading type metadata for %s from %s", module_path.name, manifest)
        data = self._read(module_path, manifest)
        entries = data.get("types")
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise MetadataLoadError(module_path, f"{manifest.name}: 'types' must be a list")

        types = tuple(self._descriptor(module_path, manifest, entry) for entry in entries)
        return ModuleUnit(path=module_path, types=types)

    def _read(self, module_path: Path, manifest: Path) -> Dict[str, Any]:
        try:
            text = manifest.read_text(encoding="utf-8")
        except OSError as exc:
            raise MetadataLoadError(module_path, f"Failed to read {manifest}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MetadataLoadError(module_path, f"Failed to parse {manifest.name}: {exc}") from exc
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise MetadataLoadError(module_path, f"{manifest.name} must contain a mapping at the root")
        return loaded

    def _descriptor(self, module_path: Path, manifest: Path, entry: Any) -> TypeDescriptor:
        if isinstance(entry, str):
            entry = {"full_name": entry}
        if not isinstance(entry, dict):
            raise MetadataLoadError(module_path, f"{manifest.name}: type entries must be mappings")

        full_name = entry.get("full_name")
        if not isinstance(full_name, str) or not full_name.strip():
            raise MetadataLoadError(module_path, f"{manifest.name}: type entry without 'full_name'")

        prefix, dot, tail = full_name.rpartition(".")
        name = entry.get("name") or tail
        if "namespace" in entry:
            namespace = entry["namespace"] or None
        else:
            namespace = prefix if dot else None

        kind_value = str(entry.get("kind", TypeKind.CLASS.value)).lower()
        try:
            kind = TypeKind(kind_value)
        except ValueError as exc:
            raise MetadataLoadError(
                module_path, f"{manifest.name}: unknown kind '{kind_value}' for {full_name}"
            ) from exc

        return TypeDescriptor(
            full_name=full_name,
            name=str(name),
            namespace=str(namespace) if namespace is not None else None,
            is_public=_as_bool(entry.get("public"), default=True),
            kind=kind,
            is_generic_definition=_as_bool(entry.get("generic_definition"), default=False),
        )


def _as_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


__all__ = ["MANIFEST_SUFFIXES", "ManifestMetadataProvider", "ManifestResolver"]
