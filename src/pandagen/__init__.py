"""Public API surface for pandagen."""

__version__ = "0.1.0"

from pandagen.core.contracts import (
    AnswerRecord,
    CancellationError,
    ConfigError,
    ManifestParseError,
    NextStep,
    NullScaffoldProgress,
    PandagenError,
    ScaffoldProgress,
    ScaffoldResult,
    TargetDirectoryError,
    TemplateNotFoundError,
)
from pandagen.core.hints import next_steps, pkg_from_user_agent
from pandagen.core.materialize import copy, empty_dir, is_empty, materialize_template, patch_manifest
from pandagen.core.naming import format_target_dir, is_valid_package_name, to_valid_package_name
from pandagen.core.scaffold import ScaffoldContext, ScaffoldOrchestrator, scaffold
from pandagen.core.templates import FRAMEWORKS, Framework, Variant

__all__ = [
    "FRAMEWORKS",
    "AnswerRecord",
    "CancellationError",
    "ConfigError",
    "Framework",
    "ManifestParseError",
    "NextStep",
    "NullScaffoldProgress",
    "PandagenError",
    "ScaffoldContext",
    "ScaffoldOrchestrator",
    "ScaffoldProgress",
    "ScaffoldResult",
    "TargetDirectoryError",
    "TemplateNotFoundError",
    "Variant",
    "__version__",
    "copy",
    "empty_dir",
    "format_target_dir",
    "is_empty",
    "is_valid_package_name",
    "materialize_template",
    "next_steps",
    "pkg_from_user_agent",
    "patch_manifest",
    "scaffold",
    "to_valid_package_name",
]
