"""Command-line interface for pandagen."""

from __future__ import annotations

from pandagen.cli.app import main as main
from pandagen.cli.commands import create as create_command
from pandagen.cli.parser import build_parser as build_parser
from pandagen.cli.prompts import collect_answers as collect_answers
from pandagen.cli.report import make_console as make_console
from pandagen.cli.report import print_cancelled as print_cancelled
from pandagen.cli.report import print_creating as print_creating
from pandagen.cli.report import print_success as print_success
from pandagen.core.scaffold import ScaffoldContext as ScaffoldContext
from pandagen.core.scaffold import ScaffoldOrchestrator as ScaffoldOrchestrator

run_create = create_command.run_create
