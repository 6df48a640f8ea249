"""Renders namespace, module and root reStructuredText documents."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..catalog import TypeCatalog
from ..errors import InvalidModuleName, ModuleError
from ..logging import get_logger
from ..models import ModuleFailure, ModuleUnit, NamespaceGroup, RunResult
from ..naming import (
    SlugRegistry,
    directive_name,
    module_display_name,
    module_slug,
    namespace_slug,
    underline,
)
from ..providers.base import MetadataProvider
from ..writer import TreeWriter
from .constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_MAXDEPTH,
    DEFAULT_SUBDIR,
    INDENT,
    MODULE_TEMPLATE,
    NAMESPACE_TEMPLATE,
    ROOT_TEMPLATE,
    ROOT_TITLE,
    ROOT_UNDERLINE,
)


class DocumentTemplates:
    """Jinja2 environment for the packaged (or overridden) document templates."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(indent=INDENT, **context)

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


class NamespaceRenderer:
    """Writes one leaf document per namespace."""

    def __init__(self, writer: TreeWriter, templates: DocumentTemplates) -> None:
        self.writer = writer
        self.templates = templates

    def render(self, group: NamespaceGroup, module_name: str, output_dir: Path) -> str:
        """Write ``<output_dir>/<namespace>.rst`` and return the namespace slug."""
        identifier = namespace_slug(group.namespace)
        types = sorted(group.types, key=lambda descriptor: descriptor.name)
        content = self.templates.render(
            NAMESPACE_TEMPLATE,
            title=group.namespace,
            underline=underline(group.namespace),
            project=module_name,
            types=[
                {"name": descriptor.name, "directive": directive_name(descriptor.full_name)}
                for descriptor in types
            ],
        )
        self.writer.write_document(identifier, Path(output_dir) / f"{identifier}.rst", content)
        return identifier


class ModuleRenderer:
    """Writes a module's namespace documents and its index document."""

    def __init__(
        self,
        writer: TreeWriter,
        templates: DocumentTemplates,
        *,
        catalog: TypeCatalog | None = None,
        namespace_renderer: NamespaceRenderer | None = None,
        collision_policy: str = "error",
        maxdepth: int = DEFAULT_MAXDEPTH,
    ) -> None:
        self.writer = writer
        self.templates = templates
        self.catalog = catalog or TypeCatalog()
        self.namespace_renderer = namespace_renderer or NamespaceRenderer(writer, templates)
        self.collision_policy = collision_policy
        self.maxdepth = maxdepth

    def render(self, module: ModuleUnit, output_root: Path) -> str:
        """Write ``<output_root>/<slug>.rst`` plus ``<output_root>/<slug>/`` and return the slug."""
        title = module_display_name(module.path)
        slug = title.lower()
        groups = sorted(
            self.catalog.group(module.types), key=lambda group: namespace_slug(group.namespace)
        )

        registry = SlugRegistry(f"module {title}", self.collision_policy)
        for group in groups:
            registry.claim(namespace_slug(group.namespace), group.namespace, module.path)

        directory = self.writer.ensure_dir(Path(output_root) / slug)
        identifiers = [
            self.namespace_renderer.render(group, title, directory) for group in groups
        ]

        content = self.templates.render(
            MODULE_TEMPLATE,
            title=title,
            underline=underline(title),
            maxdepth=self.maxdepth,
            entries=[f"{slug}/{identifier}" for identifier in sorted(identifiers)],
        )
        self.writer.write_document(slug, Path(output_root) / f"{slug}.rst", content)
        return slug


class RootIndexBuilder:
    """Renders every module in caller order and the top-level ``API`` index."""

    def __init__(
        self,
        provider: MetadataProvider,
        writer: TreeWriter,
        templates: DocumentTemplates,
        *,
        module_renderer: ModuleRenderer | None = None,
        subdir: str = DEFAULT_SUBDIR,
        collision_policy: str = "error",
        maxdepth: int = DEFAULT_MAXDEPTH,
    ) -> None:
        self.provider = provider
        self.writer = writer
        self.templates = templates
        self.module_renderer = module_renderer or ModuleRenderer(
            writer,
            templates,
            collision_policy=collision_policy,
            maxdepth=maxdepth,
        )
        self.subdir = subdir
        self.collision_policy = collision_policy
        self.maxdepth = maxdepth
        self.logger = get_logger("rendering")

    def render(
        self,
        modules: Sequence[Path],
        output_root: Path,
        description: str | None = None,
    ) -> RunResult:
        """Write ``<output_root>/<subdir>.rst`` and every module beneath ``<subdir>/``.

        Missing module files are skipped silently. Modules whose metadata
        cannot be loaded, or whose slug collides, are recorded as failures and
        left out of the index; any OSError aborts the run.
        """
        if modules is None:
            raise TypeError("modules must not be None")

        output_root = Path(output_root)
        module_dir = self.writer.ensure_dir(output_root / self.subdir)
        result = RunResult(output_dir=output_root, root_document=output_root / f"{self.subdir}.rst")
        registry = SlugRegistry("modules", self.collision_policy)
        entries: List[str] = []

        for module_path in modules:
            module_path = Path(module_path)
            if not self.provider.exists(module_path):
                self.logger.debug("Skipping %s; file does not exist", module_path)
                result.skipped.append(module_path)
                continue
            try:
                display = module_display_name(module_path)
            except InvalidModuleName as exc:
                self.logger.warning("%s", exc)
                result.skipped.append(module_path)
                continue

            self.logger.info("Creating %s files.", display)
            try:
                unit = self.provider.load(module_path)
                # Keyed on the file so same-named modules in other directories collide.
                registry.claim(module_slug(module_path), str(module_path), module_path)
                slug = self.module_renderer.render(unit, module_dir)
            except ModuleError as exc:
                self.logger.error("%s: %s", module_path, exc)
                result.failures.append(ModuleFailure(path=module_path, message=str(exc)))
                continue

            entries.append(f"{self.subdir}/{slug}")
            result.modules.append(slug)

        content = self.templates.render(
            ROOT_TEMPLATE,
            title=ROOT_TITLE,
            underline=ROOT_UNDERLINE,
            description=DEFAULT_DESCRIPTION if description is None else description,
            maxdepth=self.maxdepth,
            entries=entries,
        )
        self.writer.write_document(self.subdir, result.root_document, content)
        result.documents = list(self.writer.documents)
        return result


__all__ = [
    "DocumentTemplates",
    "ModuleRenderer",
    "NamespaceRenderer",
    "RootIndexBuilder",
]
