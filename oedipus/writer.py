"""Directory and file primitives for the generated documentation tree."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .logging import get_logger
from .models import RenderedDocument


class TreeWriter:
    """Owns the output tree: wipes it, creates directories and writes documents."""

    def __init__(self) -> None:
        self.logger = get_logger("writer")
        self.documents: List[RenderedDocument] = []

    def reset(self, root: Path) -> Path:
        """Delete ``root`` if present and recreate it empty."""
        root = Path(root)
        if root.exists():
            self.logger.debug("Removing existing output at %s", root)
            shutil.rmtree(root)
        root.mkdir(parents=True)
        self.documents = []
        return root

    def ensure_dir(self, path: Path) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_text(self, path: Path, content: str) -> Path:
        """Write ``content`` to ``path``, replacing any existing file.

        The text lands in a sibling temporary file first and is renamed over
        the target so readers never see a half-written document.
        """
        path = Path(path)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_text(content, encoding="utf-8", newline="\n")
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        return path

    def write_document(self, identifier: str, path: Path, content: str) -> RenderedDocument:
        """Write a rendered document and record it for the run summary."""
        self.logger.debug("Creating %s", Path(path).name)
        document = RenderedDocument(identifier=identifier, path=self.write_text(path, content))
        self.documents.append(document)
        return document


__all__ = ["TreeWriter"]
