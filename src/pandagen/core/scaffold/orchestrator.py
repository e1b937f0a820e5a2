"""Scaffold orchestrator: target resolution, template copy, manifest patch."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pandagen.core.contracts.answers import AnswerRecord
from pandagen.core.contracts.exceptions import ConfigError, TargetDirectoryError, TemplateNotFoundError
from pandagen.core.contracts.progress import NullScaffoldProgress, ScaffoldProgress
from pandagen.core.contracts.result import ScaffoldResult
from pandagen.core.hints import next_steps, package_manager_name
from pandagen.core.materialize.copier import empty_dir, is_empty, materialize_template
from pandagen.core.materialize.manifest import MANIFEST_FILE, patch_manifest, read_manifest, resolve_package_name
from pandagen.core.naming import format_target_dir
from pandagen.core.scaffold.context import ScaffoldContext
from pandagen.core.templates import FRAMEWORKS, Framework, template_dir

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ScaffoldOrchestrator:
    """Drives one scaffold run from collected answers to a populated directory.

    Phases run strictly in order (``Manifest``, ``Resolve``, ``Copy``); any
    exception propagates to the caller and leaves whatever was already
    written in place.
    """

    def __init__(
        self,
        context: ScaffoldContext,
        *,
        frameworks: tuple[Framework, ...] = FRAMEWORKS,
        progress: ScaffoldProgress | None = None,
    ) -> None:
        self._context = context
        self._frameworks = frameworks
        self._progress = progress or NullScaffoldProgress()

    def target_root(self, answers: AnswerRecord) -> Path:
        target = format_target_dir(answers.project_name)
        if not target:
            raise ConfigError("project name must not be blank")
        return self._context.cwd / target

    def resolve_template(self, answers: AnswerRecord) -> tuple[str, Path]:
        name = answers.variant or answers.framework or self._context.cli_template
        if not name:
            raise TemplateNotFoundError("no template selected")
        path = template_dir(name, self._context.templates_root, self._frameworks)
        logger.debug("using template %s from %s", name, path)
        return name, path

    def resolve_target(self, answers: AnswerRecord) -> Path:
        """Create the target directory, or clear it when overwrite was confirmed."""
        root = self.target_root(answers)
        if root.exists():
            if not root.is_dir():
                raise TargetDirectoryError(f"target path is not a directory: {root}")
            if answers.overwrite:
                empty_dir(root)
            elif not is_empty(root):
                raise TargetDirectoryError(f'target directory "{root}" is not empty')
        else:
            root.mkdir(parents=True)
            logger.debug("created %s", root)
        return root

    def materialize(self, template: Path, root: Path, manifest: str) -> list[Path]:
        """Copy the template into *root*, writing ``package.json`` from *manifest*."""
        return materialize_template(template, root, overrides={MANIFEST_FILE: manifest})

    def patch(self, template: Path, package_name: str, answers: AnswerRecord) -> str:
        return patch_manifest(
            read_manifest(template),
            name=package_name,
            description=answers.description,
            author=answers.author,
        )

    def run(self, answers: AnswerRecord) -> ScaffoldResult:
        # Everything that can fail from the answers alone is checked before any filesystem write.
        template_name, template = self.resolve_template(answers)
        package_name = resolve_package_name(answers, self.target_root(answers))
        manifest = self._phase("Manifest", self.patch, template, package_name, answers)

        root = self._phase("Resolve", self.resolve_target, answers)
        files = self._phase("Copy", self.materialize, template, root, manifest)

        package_manager = package_manager_name(self._context.user_agent)
        cd_path = None if root == self._context.cwd else os.path.relpath(root, self._context.cwd)
        logger.debug("scaffolded %d top-level entries into %s", len(files), root)
        return ScaffoldResult(
            root=root,
            template=template_name,
            package_name=package_name,
            files=files,
            package_manager=package_manager,
            next_steps=next_steps(package_manager),
            cd_path=cd_path,
        )

    def _phase(self, phase: str, func: Callable[..., _T], *args: Any) -> _T:
        self._progress.phase_start(phase)
        try:
            result = func(*args)
        except BaseException as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)
        return result


def scaffold(
    answers: AnswerRecord,
    context: ScaffoldContext,
    *,
    progress: ScaffoldProgress | None = None,
) -> ScaffoldResult:
    """Run a full scaffold with the default template registry."""
    return ScaffoldOrchestrator(context, progress=progress).run(answers)


__all__ = ["ScaffoldOrchestrator", "scaffold"]
