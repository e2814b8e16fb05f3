"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_exts,
    handle_join,
    handle_mime,
    handle_split,
    handle_types,
)
from cli.completer import FileKitCompleter
from cli.constants import (
    HELP_TEXT,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
    ExtsCommand,
    JoinCommand,
    MimeCommand,
    SplitCommand,
    TypesCommand,
)
from cli.parser import ParseError, parse_command
from common.exceptions import FileKitError
from common.logging_config import get_logger

logger = get_logger(__name__)


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    """Display the welcome banner."""
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, MimeCommand):
        return handle_mime(cmd_obj)
    elif isinstance(cmd_obj, SplitCommand):
        return handle_split(cmd_obj)
    elif isinstance(cmd_obj, JoinCommand):
        return handle_join(cmd_obj)
    elif isinstance(cmd_obj, ExtsCommand):
        return handle_exts(cmd_obj)
    elif isinstance(cmd_obj, TypesCommand):
        return handle_types(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def run_command(user_input: str) -> str:
    """
    Parse and execute one command line.

    Raises:
        ParseError: If command syntax is invalid
        FileKitError: If the operation rejects its arguments
        OSError: If a file operation fails
    """
    cmd_obj = parse_command(user_input)
    return dispatch_command(cmd_obj)


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=FileKitCompleter(), history=history, style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            print(run_command(user_input))

        except ParseError as e:
            print(f"Error: {e}")
        except (FileKitError, OSError) as e:
            logger.error(f"Command failed: {e}")
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
