"""Template tree copying and target directory housekeeping."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Template file names that cannot be shipped under their real name.
RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}

_VCS_DIR = ".git"


@dataclass(frozen=True)
class CopyVerbatim:
    """Copy *source* byte-for-byte (recursively for directories)."""

    source: Path


@dataclass(frozen=True)
class WriteContent:
    """Write generated *content* instead of reading the template."""

    content: str


MaterializeStrategy = CopyVerbatim | WriteContent


def copy(src: Path, dest: Path) -> None:
    """Copy a file or a whole directory tree from *src* to *dest*."""
    if src.is_dir():
        copy_dir(src, dest)
    else:
        shutil.copyfile(src, dest)
        logger.debug("copied %s -> %s", src, dest)


def copy_dir(src_dir: Path, dest_dir: Path) -> None:
    dest_dir.mkdir(parents=True, exist_ok=True)
    for entry in src_dir.iterdir():
        copy(entry, dest_dir / entry.name)


def target_name(name: str) -> str:
    return RENAME_FILES.get(name, name)


def write_entry(root: Path, name: str, strategy: MaterializeStrategy) -> Path:
    """Materialize one top-level template entry into *root*.

    The rename table is applied to *name*; the strategy decides whether the
    entry is copied from the template or written from generated content.
    """
    target = root / target_name(name)
    if isinstance(strategy, WriteContent):
        target.write_text(strategy.content, encoding="utf-8")
        logger.debug("wrote %s (%d chars)", target, len(strategy.content))
    else:
        copy(strategy.source, target)
    return target


def materialize_template(
    template_dir: Path,
    root: Path,
    *,
    overrides: Mapping[str, str] | None = None,
) -> list[Path]:
    """Materialize every top-level entry of *template_dir* into *root*.

    Entries named in *overrides* are written from the supplied content
    without reading the template. Returns the written top-level paths in
    enumeration order.
    """
    overrides = overrides or {}
    written: list[Path] = []
    for entry in template_dir.iterdir():
        strategy: MaterializeStrategy
        if entry.name in overrides:
            strategy = WriteContent(overrides[entry.name])
        else:
            strategy = CopyVerbatim(entry)
        written.append(write_entry(root, entry.name, strategy))
    return written


def empty_dir(directory: Path) -> None:
    """Remove everything inside *directory*, keeping the directory itself.

    Does nothing when *directory* does not exist.
    """
    if not directory.exists():
        return
    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
    logger.debug("emptied %s", directory)


def is_empty(directory: Path) -> bool:
    """Return ``True`` when *directory* has no entries, or only a ``.git`` folder."""
    names = [entry.name for entry in directory.iterdir()]
    return not names or names == [_VCS_DIR]


__all__ = [
    "RENAME_FILES",
    "CopyVerbatim",
    "MaterializeStrategy",
    "WriteContent",
    "copy",
    "copy_dir",
    "empty_dir",
    "is_empty",
    "materialize_template",
    "target_name",
    "write_entry",
]
