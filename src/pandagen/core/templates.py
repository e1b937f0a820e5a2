"""Registry of bundled project templates."""

from __future__ import annotations

import importlib.resources
from pathlib import Path

from pydantic import BaseModel

from pandagen.core.contracts.exceptions import TemplateNotFoundError


class Variant(BaseModel):
    name: str
    color: str = "default"

    model_config = {"frozen": True}


class Framework(BaseModel):
    """A selectable framework; its variants, if any, name the actual templates."""

    name: str
    color: str = "default"
    variants: tuple[Variant, ...] = ()

    model_config = {"frozen": True}


FRAMEWORKS: tuple[Framework, ...] = (Framework(name="mern", color="magenta"),)


def default_templates_root() -> Path:
    """Locate the template directory inside the installed package."""
    return Path(str(importlib.resources.files("pandagen"))) / "templates"


def template_names(frameworks: tuple[Framework, ...] = FRAMEWORKS) -> list[str]:
    names: list[str] = []
    for framework in frameworks:
        if framework.variants:
            names.extend(variant.name for variant in framework.variants)
        else:
            names.append(framework.name)
    return names


def find_framework(name: str, frameworks: tuple[Framework, ...] = FRAMEWORKS) -> Framework | None:
    for framework in frameworks:
        if framework.name == name:
            return framework
    return None


def template_dir(name: str, root: Path, frameworks: tuple[Framework, ...] = FRAMEWORKS) -> Path:
    """Return the directory holding template *name* under *root*.

    Raises :class:`TemplateNotFoundError` when *name* is not registered or the
    directory is missing.
    """
    if name not in template_names(frameworks):
        raise TemplateNotFoundError(f"unknown template: {name}")
    path = root / name
    if not path.is_dir():
        raise TemplateNotFoundError(f"template directory not found: {path}")
    return path


__all__ = [
    "FRAMEWORKS",
    "Framework",
    "Variant",
    "default_templates_root",
    "find_framework",
    "template_dir",
    "template_names",
]
