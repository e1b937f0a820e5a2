"""Tests for the template registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from pandagen.core.contracts.exceptions import TemplateNotFoundError
from pandagen.core.templates import (
    FRAMEWORKS,
    Framework,
    Variant,
    default_templates_root,
    find_framework,
    template_dir,
    template_names,
)

_WITH_VARIANTS = (
    Framework(name="mern", color="magenta"),
    Framework(
        name="react",
        color="cyan",
        variants=(Variant(name="react-ts", color="blue"), Variant(name="react-js", color="yellow")),
    ),
)


def test_default_registry_offers_mern() -> None:
    assert template_names() == ["mern"]
    assert FRAMEWORKS[0].color == "magenta"


def test_variants_replace_framework_name() -> None:
    assert template_names(_WITH_VARIANTS) == ["mern", "react-ts", "react-js"]


def test_find_framework() -> None:
    assert find_framework("react", _WITH_VARIANTS) is _WITH_VARIANTS[1]
    assert find_framework("vue", _WITH_VARIANTS) is None


def test_framework_is_frozen() -> None:
    with pytest.raises(ValueError):
        FRAMEWORKS[0].name = "other"  # type: ignore[misc]


def test_template_dir_resolves_registered_name(templates_root: Path) -> None:
    assert template_dir("mern", templates_root) == templates_root / "mern"


def test_template_dir_rejects_unknown_name(templates_root: Path) -> None:
    with pytest.raises(TemplateNotFoundError, match="unknown template"):
        template_dir("vue", templates_root)


def test_template_dir_requires_existing_directory(tmp_path: Path) -> None:
    with pytest.raises(TemplateNotFoundError, match="not found"):
        template_dir("mern", tmp_path)


def test_bundled_template_ships_with_package() -> None:
    bundled = default_templates_root() / "mern"

    assert (bundled / "package.json").is_file()
    assert (bundled / "_gitignore").is_file()
