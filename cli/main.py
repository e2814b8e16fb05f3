"""CLI entry point."""

import shlex
import sys
import os
from typing import Optional

from common.exceptions import FileKitError
from common.logging_config import setup_all_logging
from cli.constants import HELP_TEXT, REPL_ONLY_COMMANDS
from cli.parser import ParseError
from cli.repl import repl_loop, run_command


def run_once(args: list[str]) -> int:
    """
    Run a single command given as command-line arguments.

    Returns:
        Process exit status (0 on success, 1 on error)
    """
    if args[0] == "help":
        print(HELP_TEXT)
        return 0
    if args[0] in REPL_ONLY_COMMANDS:
        print(f"Error: '{args[0]}' is only available in the interactive shell", file=sys.stderr)
        return 1
    try:
        print(run_command(shlex.join(args)))
    except (ParseError, FileKitError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for CLI."""
    args = list(sys.argv[1:] if argv is None else argv)
    debug = '--debug' in args
    log_level = 'DEBUG' if debug else os.getenv('LOG_LEVEL', 'INFO')

    logger = setup_all_logging(log_level)

    if debug:
        logger.info("Debug logging enabled")
        args.remove('--debug')

    if args:
        return run_once(args)

    logger.info("CLI starting...")
    try:
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
