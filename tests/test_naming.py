"""Tests for oedipus.naming."""

from __future__ import annotations

from pathlib import Path

import pytest

from oedipus.errors import InvalidModuleName, SlugCollisionError
from oedipus.naming import (
    SlugRegistry,
    directive_name,
    module_display_name,
    module_slug,
    namespace_slug,
    underline,
)


@pytest.mark.parametrize(
    ("path", "display", "slug"),
    [
        ("Acme.Core.dll", "Acme.Core", "acme.core"),
        ("/opt/bin/Telvent.Framework.Data.dll", "Telvent.Framework.Data", "telvent.framework.data"),
        ("Tool.exe", "Tool", "tool"),
        ("README", "README", "readme"),
    ],
)
def test_module_names_derive_from_file_name(path: str, display: str, slug: str) -> None:
    assert module_display_name(path) == display
    assert module_slug(Path(path)) == slug
    assert module_slug(path) == module_display_name(path).lower()


def test_module_display_name_rejects_empty_stem() -> None:
    with pytest.raises(InvalidModuleName):
        module_display_name(".dll")


def test_namespace_slug_and_directive_name() -> None:
    assert namespace_slug("Acme.Core.Widgets") == "acme.core.widgets"
    assert directive_name("Acme.Core.Widgets.Button") == "Acme::Core::Widgets::Button"


def test_underline_is_one_longer_than_title() -> None:
    assert underline("Acme") == "====="
    assert underline("") == "="


def test_registry_raises_on_collision_by_default() -> None:
    registry = SlugRegistry("modules")
    registry.claim("acme", "Acme", "Acme.dll")
    registry.claim("acme", "Acme", "Acme.dll")

    with pytest.raises(SlugCollisionError) as excinfo:
        registry.claim("acme", "ACME", "ACME.dll")

    assert excinfo.value.slug == "acme"
    assert excinfo.value.module_path == Path("ACME.dll")
    assert "acme" in str(excinfo.value)


def test_registry_overwrite_policy_warns(caplog: pytest.LogCaptureFixture) -> None:
    registry = SlugRegistry("modules", policy="overwrite")
    registry.claim("acme", "Acme", "Acme.dll")

    with caplog.at_level("WARNING", logger="oedipus.naming"):
        registry.claim("acme", "ACME", "ACME.dll")

    assert "acme" in registry
    assert any("overwrites" in record.getMessage() for record in caplog.records)


def test_registry_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError):
        SlugRegistry("modules", policy="rename")


def test_registry_distinguishes_claimants_by_key() -> None:
    registry = SlugRegistry("modules")
    registry.claim("acme", "/one/Acme.dll", "/one/Acme.dll")
    registry.claim("acme", "/one/Acme.dll", "/one/Acme.dll")

    with pytest.raises(SlugCollisionError) as excinfo:
        registry.claim("acme", "/two/Acme.dll", "/two/Acme.dll")

    assert excinfo.value.first == "/one/Acme.dll"
    assert excinfo.value.second == "/two/Acme.dll"
