"""Explicit runtime configuration for a scaffold run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pandagen.core.templates import default_templates_root

USER_AGENT_ENV = "npm_config_user_agent"


@dataclass(frozen=True)
class ScaffoldContext:
    """Process-level inputs the orchestrator needs, passed in rather than read globally.

    Attributes:
        cwd: Directory the project name is resolved against.
        templates_root: Directory containing one sub-directory per template.
        user_agent: Package-manager user agent, used only to pick hint commands.
        cli_template: ``-t/--template`` value; the last fallback when choosing
            a template.
    """

    cwd: Path
    templates_root: Path
    user_agent: str | None = None
    cli_template: str | None = None

    @classmethod
    def from_environment(
        cls,
        *,
        cli_template: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ScaffoldContext:
        env = os.environ if environ is None else environ
        return cls(
            cwd=Path.cwd(),
            templates_root=default_templates_root(),
            user_agent=env.get(USER_AGENT_ENV),
            cli_template=cli_template,
        )


__all__ = ["USER_AGENT_ENV", "ScaffoldContext"]
