"""Tests for FileKitCompleter."""

import pytest

from prompt_toolkit.document import Document

from cli.completer import FileKitCompleter
from cli.constants import COMMANDS


@pytest.fixture
def work_dir(tmp_path):
    """
    Create a working directory with files to complete.

    Returns:
        Path to the temporary directory
    """
    (tmp_path / 'backup.tar').write_text('content')
    (tmp_path / 'backup.tar.001').write_text('content')
    (tmp_path / 'photo.png').write_text('content')
    (tmp_path / '.hidden').write_text('content')
    docs = tmp_path / 'docs'
    docs.mkdir()
    (docs / 'report.pdf').write_text('content')
    return tmp_path


@pytest.fixture
def completer(work_dir):
    """Create a FileKitCompleter rooted at the working directory."""
    return FileKitCompleter(base_dir=work_dir)


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    """Tests for command name completion."""

    def test_empty_input_shows_all_commands(self, completer):
        """Empty input should suggest all commands."""
        assert get_completions_list(completer, "") == COMMANDS

    def test_partial_command_filters(self, completer):
        """Partial command should filter to matching commands."""
        assert get_completions_list(completer, "sp") == ["split"]

    def test_partial_command_is_case_insensitive(self, completer):
        """Command completion ignores case."""
        assert get_completions_list(completer, "JO") == ["join"]


class TestPathCompletion:
    """Tests for file path completion."""

    def test_lists_directory_entries(self, completer):
        """A fresh argument lists visible entries, directories with '/'."""
        completions = get_completions_list(completer, "split ")
        assert completions == ["backup.tar", "backup.tar.001", "docs/", "photo.png"]

    def test_filters_by_prefix(self, completer):
        """Partial names filter entries."""
        assert get_completions_list(completer, "join back") == ["backup.tar", "backup.tar.001"]

    def test_completes_inside_subdirectory(self, completer):
        """Paths with directories complete the last component."""
        assert get_completions_list(completer, "mime docs/re") == ["docs/report.pdf"]

    def test_hidden_files_need_dot(self, completer):
        """Hidden entries only show when the prefix starts with a dot."""
        assert ".hidden" not in get_completions_list(completer, "mime ")
        assert get_completions_list(completer, "mime .hid") == [".hidden"]

    def test_missing_directory_yields_nothing(self, completer):
        """Completing inside a missing directory gives no suggestions."""
        assert get_completions_list(completer, "mime nowhere/x") == []

    def test_no_path_completion_for_lookups(self, completer):
        """exts and types do not complete file paths."""
        assert get_completions_list(completer, "exts ") == []
        assert get_completions_list(completer, "types p") == []
