"""Custom completer for filekit CLI with file path autocompletion."""

from pathlib import Path
from typing import Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, PATH_COMMANDS


class FileKitCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - File path completion for the arguments of mime, split and join
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Args:
            base_dir: Directory relative paths are completed against (default: cwd)
        """
        self.base_dir = base_dir

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.

        For the first token, completes command names.
        For path-taking commands, completes files and directories.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command not in PATH_COMMANDS:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete file and directory names for the partial path.

        Directories are suggested with a trailing '/'; hidden entries only
        when the partial name starts with a dot.
        """
        base_dir = self.base_dir or Path.cwd()

        if "/" in partial:
            dir_part, name_part = partial.rsplit("/", 1)
            dir_part += "/"
        else:
            dir_part, name_part = "", partial

        search_dir = Path(dir_part).expanduser()
        if not search_dir.is_absolute():
            search_dir = base_dir / search_dir

        if not search_dir.is_dir():
            return

        for item in sorted(search_dir.iterdir()):
            name = item.name
            if name.startswith(".") and not name_part.startswith("."):
                continue
            if not name.startswith(name_part):
                continue
            suffix = "/" if item.is_dir() else ""
            yield Completion(
                dir_part + name + suffix,
                start_position=-len(partial),
                display=name + suffix,
            )
