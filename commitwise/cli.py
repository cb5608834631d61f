"""Command-line entry point: ask the questions, build the message, commit."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Optional, Sequence

from commitwise.config import ConfigError, get_config_path, read_setting_file
from commitwise.git import build_commit_message, commit
from commitwise.prompts import run_prompts
from commitwise.questions import parse_question_list

VERSION = "0.0.1"

_DESCRIPTION = """\
CommitWise is an interactive command-line tool designed to help you craft clean, \
consistent, and standardized Git commit messages.

It provides a user-friendly terminal interface that guides you through building \
commit messages based on predefined formats — such as Conventional Commits, Gitmoji, \
or your own custom templates.

Perfect for teams and individuals who want to keep their commit history organized, \
meaningful, and aligned with best practices."""


class _FlowError(Exception):
    pass


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitwise",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default="", help="specify config file path")
    parser.add_argument("--version", action="version", version=f"commitwise version {VERSION}")
    return parser


def _run(config_flag: str) -> None:
    if config_flag:
        path = config_flag
    else:
        try:
            path = get_config_path()
        except ConfigError as exc:
            raise _FlowError(f"getting file path: {exc}") from exc

    try:
        settings = read_setting_file(path)
    except ConfigError as exc:
        raise _FlowError(f"reading config file: {exc}") from exc

    questions = parse_question_list(settings.questions)
    try:
        model = run_prompts(questions, settings.colors)
    except (OSError, ValueError) as exc:
        raise _FlowError(f"there's been an error: {exc}") from exc

    if model.error is not None:
        raise _FlowError(str(model.error))

    message = build_commit_message(settings.template_commit, model.answers, model.questions)
    try:
        commit(message)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise _FlowError(f"committing: {exc}") from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the commit helper; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args.config)
    except _FlowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())