"""Phase events emitted while a project is scaffolded.

A run goes through three phases, always in this order:

``Manifest``
    The template's ``package.json`` is read and patched in memory. Nothing is
    written yet, so a broken manifest leaves the disk untouched.
``Resolve``
    The target directory is created, or emptied after a confirmed overwrite.
``Copy``
    The template tree is written into the target, ``package.json`` included.

A failing phase gets ``phase_error`` instead of ``phase_done`` and no later
phase starts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScaffoldProgress(ABC):
    """Receives ``Manifest``/``Resolve``/``Copy`` events from ``ScaffoldOrchestrator``."""

    @abstractmethod
    def phase_start(self, phase: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """*phase* raised *error*; the run stops and *error* reaches the caller."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """Drops every event. Library calls get this unless they pass a progress."""

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
