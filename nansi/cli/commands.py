from __future__ import annotations

import argparse
import logging
import sys

from nansi.config import ConfigError, load_task_list
from nansi.executor import ExecutionError, Executor
from nansi.report import Reporter
from nansi.templating import TemplateError

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)

        if args.list:
            return cmd_list(args)
        return cmd_run(args)

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except (TemplateError, ExecutionError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    task_list = load_task_list(args.nansi_file)
    Executor(Reporter()).run(task_list)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    task_list = load_task_list(args.nansi_file)
    Reporter().plan(task_list)
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
