"""Pipeline orchestration for a full regeneration of the API documentation tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .config import OedipusConfig
from .logging import get_logger
from .models import RunResult
from .providers import MetadataProvider, discover_provider
from .rendering import DocumentTemplates, RootIndexBuilder
from .writer import TreeWriter


class Orchestrator:
    """Wipes the output directory and rebuilds every document from module metadata.

    Runs assume exclusive ownership of the output directory; concurrent runs
    against the same directory must be serialized by the caller.
    """

    def __init__(
        self,
        config: OedipusConfig | None = None,
        provider: MetadataProvider | None = None,
        writer: TreeWriter | None = None,
        templates: DocumentTemplates | None = None,
    ) -> None:
        self.config = config or OedipusConfig(root=Path.cwd())
        self.provider = provider or discover_provider(
            self.config.provider, search_paths=self.config.search_paths
        )
        self.writer = writer or TreeWriter()
        self.templates = templates or DocumentTemplates(self.config.templates_dir)
        self.logger = get_logger("orchestrator")

    def run(
        self,
        files: Iterable[Path | str],
        output_dir: Path | str,
        description: str | None = None,
    ) -> RunResult:
        """Regenerate ``output_dir`` for ``files`` in the order given."""
        if files is None:
            raise TypeError("files must not be None")
        if output_dir is None:
            raise TypeError("output_dir must not be None")

        modules: Sequence[Path] = [Path(path).expanduser().resolve() for path in files]
        output_root = Path(output_dir).expanduser().resolve()
        self.logger.info("Generating API documentation for %d modules in %s", len(modules), output_root)

        self.writer.reset(output_root)
        builder = RootIndexBuilder(
            self.provider,
            self.writer,
            self.templates,
            subdir=self.config.subdir,
            collision_policy=self.config.collisions,
            maxdepth=self.config.maxdepth,
        )
        if description is None:
            description = self.config.description
        result = builder.render(modules, output_root, description)

        self.logger.info(
            "Wrote %d documents (%d modules, %d skipped, %d failed)",
            len(result.documents),
            len(result.modules),
            len(result.skipped),
            len(result.failures),
        )
        return result


__all__ = ["Orchestrator"]
