"""Template manifest (``package.json``) patching."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pandagen.core.contracts.answers import AnswerRecord
from pandagen.core.contracts.exceptions import ConfigError, ManifestParseError
from pandagen.core.naming import is_valid_package_name, to_valid_package_name

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


def patch_manifest(raw: str, *, name: str, description: str, author: str) -> str:
    """Return *raw* with ``name``, ``description`` and ``author`` replaced.

    Every other key is kept as-is and in its original position. Empty strings
    are written explicitly rather than dropping the key.

    Raises :class:`ManifestParseError` when *raw* is not a JSON object.
    """
    try:
        manifest: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"invalid JSON in template manifest: {exc}") from exc
    if not isinstance(manifest, dict):
        raise ManifestParseError("template manifest must be a JSON object")

    manifest["name"] = name
    manifest["description"] = description
    manifest["author"] = author
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


def resolve_package_name(answers: AnswerRecord, root: Path) -> str:
    """Pick the manifest ``name``: the answer, else the normalized directory name."""
    answered = answers.package_name.strip()
    if answered:
        if not is_valid_package_name(answered):
            raise ConfigError(f"invalid package name: {answered!r}")
        return answered
    fallback = to_valid_package_name(root.name)
    if not fallback:
        raise ConfigError(f"cannot derive a package name from directory {root.name!r}")
    logger.debug("package name defaulted to %s", fallback)
    return fallback


def read_manifest(template_dir: Path) -> str:
    return (template_dir / MANIFEST_FILE).read_text(encoding="utf-8")


__all__ = ["MANIFEST_FILE", "patch_manifest", "read_manifest", "resolve_package_name"]
