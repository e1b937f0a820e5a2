"""Create command handler."""

from __future__ import annotations

import argparse
import sys
from contextlib import nullcontext


def run_create(args: argparse.Namespace) -> int:
    """Collect answers, scaffold the project, and print the next steps.

    Errors propagate to :func:`pandagen.cli.app.main`.
    """
    import pandagen.cli as cli

    context = cli.ScaffoldContext.from_environment(cli_template=args.template)
    answers = cli.collect_answers(context)

    progress = None
    if sys.stderr.isatty():
        from pandagen.cli.progress.rich import RichScaffoldProgress

        progress = RichScaffoldProgress()
    orchestrator = cli.ScaffoldOrchestrator(context, progress=progress)

    console = cli.make_console()
    cli.print_creating(console, orchestrator.target_root(answers))
    with progress or nullcontext():
        result = orchestrator.run(answers)

    cli.print_success(console, result)
    return 0


__all__ = ["run_create"]
