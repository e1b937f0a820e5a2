"""Prompt answer contracts."""

from __future__ import annotations

from pydantic import BaseModel


class AnswerRecord(BaseModel):
    """Answers collected once per run, consumed by the scaffold orchestrator."""

    project_name: str
    package_name: str = ""
    description: str = ""
    author: str = ""
    overwrite: bool | None = None
    framework: str | None = None
    variant: str | None = None

    model_config = {"frozen": True}
