"""Package-name validation and target-directory helpers."""

from __future__ import annotations

import re

_PACKAGE_NAME_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE_RE = re.compile(r"^[._]+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9-~]+")
_TRAILING_SLASHES_RE = re.compile(r"/+$")

INVALID_PACKAGE_NAME = "Invalid package name"


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when *name* follows the npm registry naming convention.

    An optional ``@scope/`` prefix is allowed; the final segment must be
    lowercase and must not start with ``.`` or ``_``.
    """
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Normalize an arbitrary string into a package name.

    The result is valid whenever it is non-empty. Inputs such as ``""``,
    ``"   "`` or ``"."`` normalize to the empty string, which callers must
    handle themselves.
    """
    candidate = name.strip().lower()
    candidate = _WHITESPACE_RE.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE_RE.sub("", candidate)
    return _DISALLOWED_RE.sub("-", candidate)


def validate_package_name_answer(value: str, *, allow_blank: bool = True) -> bool | str:
    # Blank means "derive from the target directory name".
    candidate = value.strip()
    if not candidate:
        return True if allow_blank else INVALID_PACKAGE_NAME
    if is_valid_package_name(candidate):
        return True
    return INVALID_PACKAGE_NAME


def format_target_dir(value: str | None) -> str:
    """Trim whitespace and trailing slashes from a project name."""
    if value is None:
        return ""
    return _TRAILING_SLASHES_RE.sub("", value.strip())


def validate_project_name_answer(value: str) -> bool | str:
    if not format_target_dir(value):
        return "Project name is required"
    return True


__all__ = [
    "INVALID_PACKAGE_NAME",
    "format_target_dir",
    "is_valid_package_name",
    "to_valid_package_name",
    "validate_package_name_answer",
    "validate_project_name_answer",
]
