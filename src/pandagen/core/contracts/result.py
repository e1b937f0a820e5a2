"""Scaffold result contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class NextStep(BaseModel):
    command: str
    description: str

    model_config = {"frozen": True}


class ScaffoldResult(BaseModel):
    """Outcome of a completed scaffold run.

    Attributes:
        root: Absolute path of the populated target directory.
        template: Name of the template that was materialized.
        package_name: Value written to the manifest ``name`` field.
        files: Top-level paths written into ``root``, manifest last.
        package_manager: Manager name the hints were selected for.
        next_steps: Commands to suggest after scaffolding.
        cd_path: Path relative to the working directory, or ``None`` when the
            target is the working directory itself.
    """

    root: Path
    template: str
    package_name: str
    files: list[Path] = Field(default_factory=list)
    package_manager: str = "npm"
    next_steps: list[NextStep] = Field(default_factory=list)
    cd_path: str | None = None

    model_config = {"frozen": True}
