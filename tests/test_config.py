"""Tests for oedipus.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from oedipus.config import ConfigError, OedipusConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, OedipusConfig)
    assert config.root == tmp_path.resolve()
    assert config.output is None
    assert config.description is None
    assert config.subdir == "apidocs"
    assert config.maxdepth == 2
    assert config.provider == "manifest"
    assert config.search_paths == []
    assert config.collisions == "error"
    assert config.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".oedipus.yml"
    config_file.write_text(
        """
output: "build/docs"
description: "Reference for the Acme SDK."
subdir: reference
maxdepth: 3
provider: manifest
search_paths:
  - metadata
  - "vendor/metadata"
collisions: overwrite
templates_dir: "docs/templates"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)
    root = tmp_path.resolve()

    assert config.output == root / "build" / "docs"
    assert config.description == "Reference for the Acme SDK."
    assert config.subdir == "reference"
    assert config.maxdepth == 3
    assert config.provider == "manifest"
    assert config.search_paths == [root / "metadata", root / "vendor" / "metadata"]
    assert config.collisions == "overwrite"
    assert config.templates_dir == root / "docs" / "templates"


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".oedipus.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.subdir == "apidocs"


def test_load_config_single_search_path_string(tmp_path: Path) -> None:
    (tmp_path / ".oedipus.yml").write_text("search_paths: metadata\n", encoding="utf-8")

    assert load_config(tmp_path).search_paths == [tmp_path.resolve() / "metadata"]


@pytest.mark.parametrize(
    "content",
    [
        "- not\n- a mapping\n",
        "collisions: rename\n",
        "maxdepth: 0\n",
        "subdir: a/b\n",
        "output: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_files(tmp_path: Path, content: str) -> None:
    (tmp_path / ".oedipus.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
