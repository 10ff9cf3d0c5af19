"""Interactive REPL for CodeMentor."""

from .session import MentorREPL
from .commands import COMMANDS, get_command_help

__all__ = ["MentorREPL", "COMMANDS", "get_command_help"]
