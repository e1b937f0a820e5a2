"""Scaffold orchestration."""

from pandagen.core.scaffold.context import USER_AGENT_ENV, ScaffoldContext
from pandagen.core.scaffold.orchestrator import ScaffoldOrchestrator, scaffold

__all__ = ["USER_AGENT_ENV", "ScaffoldContext", "ScaffoldOrchestrator", "scaffold"]
