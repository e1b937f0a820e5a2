"""Interactive answer collection using questionary."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from pandagen.core.contracts.answers import AnswerRecord
from pandagen.core.contracts.exceptions import CancellationError
from pandagen.core.materialize.copier import is_empty
from pandagen.core.naming import (
    format_target_dir,
    to_valid_package_name,
    validate_package_name_answer,
    validate_project_name_answer,
)
from pandagen.core.scaffold.context import ScaffoldContext
from pandagen.core.templates import FRAMEWORKS, Framework, find_framework, template_names

DEFAULT_PROJECT_NAME = "panda-template"


def _ask(question: Any) -> Any:
    # questionary returns None when the prompt is interrupted (Ctrl+C / Esc).
    answer = question.ask()
    if answer is None:
        raise CancellationError()
    return answer


def _styled(name: str, color: str) -> list[tuple[str, str]]:
    style = "" if color == "default" else f"fg:ansi{color}"
    return [(style, name)]


def collect_answers(context: ScaffoldContext, *, frameworks: tuple[Framework, ...] = FRAMEWORKS) -> AnswerRecord:
    """Run the prompt sequence and return the collected answers.

    Nothing on disk is touched here. Raises :class:`CancellationError` when
    any prompt is aborted or an overwrite is declined.
    """
    import questionary

    project_name = _ask(
        questionary.text(
            "Enter the name of your project:",
            default=DEFAULT_PROJECT_NAME,
            validate=validate_project_name_answer,
        )
    )
    target_dir = format_target_dir(project_name)
    root = context.cwd / target_dir

    overwrite: bool | None = None
    if root.is_dir() and not is_empty(root):
        label = "Current directory" if root == context.cwd else f'Target directory "{target_dir}"'
        overwrite = _ask(
            questionary.confirm(f"{label} is not empty. Remove existing files and continue?", default=False)
        )
        if not overwrite:
            raise CancellationError()

    default_package_name = to_valid_package_name(root.name)
    validate_package_name: Callable[[str], bool | str] = validate_package_name_answer
    if not default_package_name:
        validate_package_name = functools.partial(validate_package_name_answer, allow_blank=False)
    package_name = _ask(
        questionary.text(
            "Package name:",
            default=default_package_name,
            validate=validate_package_name,
        )
    )

    framework_name: str | None = None
    variant_name: str | None = None
    if context.cli_template not in template_names(frameworks):
        framework_name = _ask(
            questionary.select(
                "Select a framework:",
                choices=[questionary.Choice(_styled(fw.name, fw.color), value=fw.name) for fw in frameworks],
            )
        )
        framework = find_framework(framework_name, frameworks)
        if framework is not None and framework.variants:
            variant_name = _ask(
                questionary.select(
                    "Select a variant:",
                    choices=[
                        questionary.Choice(_styled(variant.name, variant.color), value=variant.name)
                        for variant in framework.variants
                    ],
                )
            )

    description = _ask(questionary.text("Description:", default=""))
    author = _ask(questionary.text("Author:", default=""))

    return AnswerRecord(
        project_name=project_name,
        package_name=package_name.strip(),
        description=description.strip(),
        author=author.strip(),
        overwrite=overwrite,
        framework=framework_name,
        variant=variant_name,
    )


__all__ = ["DEFAULT_PROJECT_NAME", "collect_answers"]
