# File: readonly_cleaner/interface/cli.py

import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from readonly_cleaner.core.config.settings import settings
from readonly_cleaner.core.database.connection import init_db
from readonly_cleaner.features.activity_log.service.api import ActivityLogService
from readonly_cleaner.features.clear_command.service.command import ClearCommand
from readonly_cleaner.features.normalizer.domain.errors import EnumerationError, RootNotFound

logger = logging.getLogger(__name__)

EXIT_ROOT_NOT_FOUND = 2
EXIT_ABORTED = 3


# ------------------------------ Commands ------------------------------ #

def run_clear(args: argparse.Namespace) -> int:
    try:
        result = ClearCommand().execute(args.path)
    except RootNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ROOT_NOT_FOUND
    except EnumerationError as e:
        print(f"Aborted: {e}", file=sys.stderr)
        print(f"{e.report.total} files processed before the walk stopped, {e.report.failed} failed",
              file=sys.stderr)
        return EXIT_ABORTED

    print(result.message)
    return result.exit_code


def run_history(args: argparse.Namespace) -> int:
    try:
        runs = ActivityLogService().recent(args.limit)
    except SQLAlchemyError as e:
        print(f"Activity log unavailable: {e}", file=sys.stderr)
        return 1

    if not runs:
        print("No runs recorded yet.")
        return 0

    for run in runs:
        finished = run.finished_at.strftime("%Y-%m-%d %H:%M:%S") if run.finished_at else "-"
        print(f"{finished}  {run.status.value:<14} {run.files_succeeded}/{run.files_total} ok  {run.root_path}")
        for file_path, reason in run.failures:
            print(f"    {file_path}: {reason}")
        if run.error_message:
            print(f"    error: {run.error_message}")
    return 0


# ------------------------------ Entry point ------------------------------ #

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def resolve_log_level(name: str) -> int:
    """Unknown level names fall back to INFO instead of failing startup."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readonly-cleaner",
        description="Reset file attributes (read-only, hidden, system) under a folder."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    clear = sub.add_parser("clear", help="Reset attributes of every file under PATH")
    clear.add_argument("path", help="Folder to clean, or a solution/project file inside it")
    clear.set_defaults(func=run_clear)

    history = sub.add_parser("history", help="Show recent runs from the activity log")
    history.add_argument("--limit", type=positive_int, default=settings.HISTORY_LIMIT)
    history.set_defaults(func=run_history)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = resolve_log_level(settings.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if not isinstance(logging.getLevelName(settings.LOG_LEVEL), int):
        logger.warning(f"Unknown log level {settings.LOG_LEVEL!r}, using INFO")

    # The activity log is diagnostic only; clearing still runs without it
    try:
        init_db()
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Activity log unavailable: {e}")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
