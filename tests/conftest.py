from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.module_builder import ModuleBuilder


@pytest.fixture
def module_builder(tmp_path: Path) -> ModuleBuilder:
    """Provide a reusable module builder rooted at the pytest tmp_path."""
    return ModuleBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_oedipus_logger():
    """Undo CLI logging configuration so caplog sees oedipus records."""
    yield
    logger = logging.getLogger("oedipus")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
