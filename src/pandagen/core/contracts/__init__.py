"""Core contracts shared by the scaffold engine and the CLI."""

from pandagen.core.contracts.answers import AnswerRecord
from pandagen.core.contracts.exceptions import (
    CancellationError,
    ConfigError,
    ManifestParseError,
    PandagenError,
    TargetDirectoryError,
    TemplateNotFoundError,
)
from pandagen.core.contracts.progress import NullScaffoldProgress, ScaffoldProgress
from pandagen.core.contracts.result import NextStep, ScaffoldResult

__all__ = [
    "AnswerRecord",
    "CancellationError",
    "ConfigError",
    "ManifestParseError",
    "NextStep",
    "NullScaffoldProgress",
    "PandagenError",
    "ScaffoldProgress",
    "ScaffoldResult",
    "TargetDirectoryError",
    "TemplateNotFoundError",
]
