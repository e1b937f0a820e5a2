"""Custom exception hierarchy for pandagen.

All pandagen exceptions inherit from :class:`PandagenError`, making it easy
to catch any scaffold error with a single ``except`` clause while still
allowing callers to handle specific failure modes.
"""

from __future__ import annotations


class PandagenError(Exception):
    """Base exception for all pandagen errors."""


class CancellationError(PandagenError):
    """Raised when the user aborts the prompt sequence."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class ConfigError(PandagenError):
    """Raised when the collected answers cannot produce a usable scaffold."""


class ManifestParseError(PandagenError):
    """Raised when the template manifest is not a JSON object."""


class TemplateNotFoundError(PandagenError):
    """Raised when no bundled template matches the selected name."""


class TargetDirectoryError(PandagenError):
    """Raised when the target directory is not empty and overwrite was not confirmed."""
