"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["mime", "split", "join", "exts", "types", "clear", "exit", "help"]

PATH_COMMANDS = ("mime", "split", "join")

REPL_ONLY_COMMANDS = ("clear", "exit")

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[38;2;46;158;107m"
RESET = "\033[0m"

WELCOME_TITLE = f"{GREEN}filekit{RESET} - MIME detection and file splitting"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "filekit> "

HELP_TEXT = """Available commands:
  mime <path> [original_name]         Detect MIME type (extension taken from original_name or path)
  split <path> [piece_size_mb]        Split file into <path>.001, <path>.002, ... (default from config)
  join <base_path> [output_path]      Join <base_path>.001, .002, ... into base_path or output_path
  exts <mime_type>                    List extensions registered for a MIME type
  types <extension>                   List MIME types registered for an extension
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Joining stops at the first missing piece number.
Examples:
  mime uploads/tmp123 photo.png
  split backup.tar 50
  join backup.tar restored.tar
  exts image/jpeg
  types docx"""
