r"""Command line entry point: run a command until it succeeds.

Examples:
    Run a flaky download at most five times, ten seconds apart::

        $ aretry --max-retries 5 --delay 10 -- curl -fsS https://example.com/data.json

    Only retry when the command itself fails, not when it cannot be found::

        $ aretry --retry-on command -- ./sync.sh
"""

from __future__ import annotations

__all__ = ["build_parser", "main", "run_command", "setup_logging"]

import argparse
import logging
import subprocess
import sys
from typing import TYPE_CHECKING

from aretry.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES, RetryConfig
from aretry.exceptions import CommandFailedError
from aretry.kinds import ErrorKind
from aretry.retry.executor import RetryExecutor
from aretry.utils.structured_logging import StructuredFormatter, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: logging.Logger = logging.getLogger(__name__)

TEXT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Shell conventions for a command that cannot be started
EXIT_COMMAND_NOT_FOUND = 127
EXIT_COMMAND_NOT_EXECUTABLE = 126

EXIT_CODES_HELP = """exit status:
  0    the command succeeded
  N    the command's own non-zero status, after the last attempt or a
       non-retryable failure
  126  the command could not be executed (permission denied)
  127  the command was not found
  1    any other failure
  2    invalid arguments
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aretry",
        description="Run a command, retrying it with a fixed delay until it succeeds.",
        epilog=EXIT_CODES_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=DEFAULT_MAX_RETRIES,
        help="total number of attempts, 1 to 100 (default: %(default)s)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help="seconds to wait between attempts, 1 to 3600 (default: %(default)s)",
    )
    parser.add_argument(
        "--retry-on",
        action="append",
        default=[],
        choices=[kind.value for kind in ErrorKind],
        metavar="KIND",
        help="only retry failures of this kind, may be repeated (default: retry any failure)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="minimum level of progress messages (default: %(default)s)",
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=["text", "json"],
        help="progress message format (default: %(default)s)",
    )
    parser.add_argument("--correlation-id", help="identifier attached to JSON log lines")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="command to run, after --")
    return parser


def setup_logging(level: str, log_format: str) -> None:
    """Send aretry progress messages to stderr.

    Args:
        level: Name of the minimum log level.
        log_format: ``"text"`` or ``"json"``.
    """
    handler = logging.StreamHandler(sys.stderr)
    if log_format == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT))
    package_logger = logging.getLogger("aretry")
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def run_command(command: Sequence[str]) -> None:
    """Run a command once.

    Args:
        command: The program and its arguments.

    Raises:
        CommandFailedError: If the command exits with a non-zero status.
        OSError: If the command cannot be started.
        ValueError: If the command contains an embedded null byte.
    """
    completed = subprocess.run(list(command), check=False)  # noqa: S603
    if completed.returncode != 0:
        raise CommandFailedError(command, completed.returncode)


def _exit_code(error: BaseException) -> int:
    if isinstance(error, CommandFailedError) and error.returncode > 0:
        return error.returncode
    if isinstance(error, FileNotFoundError):
        return EXIT_COMMAND_NOT_FOUND
    if isinstance(error, PermissionError):
        return EXIT_COMMAND_NOT_EXECUTABLE
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        parser.error("no command provided")

    try:
        config = RetryConfig(
            max_retries=args.max_retries,
            delay=args.delay,
            retryable_errors={ErrorKind(kind) for kind in args.retry_on},
        )
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))

    setup_logging(args.log_level, args.log_format)
    if args.correlation_id:
        set_correlation_id(args.correlation_id)

    try:
        result = RetryExecutor(config).execute(lambda: run_command(command))
    except Exception as exc:  # noqa: BLE001
        # already reported by the executor as a non-retryable failure
        return _exit_code(exc)
    if result.error is not None:
        return _exit_code(result.error.last_error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
