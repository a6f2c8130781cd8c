"""Built-in workspace tools available to every deep agent."""
from .filesystem import edit_file, ls, read_file, write_file
from .planning import read_todos, write_todos

BUILTIN_TOOLS = [write_todos, read_todos, ls, read_file, write_file, edit_file]

__all__ = [
    "BUILTIN_TOOLS",
    "edit_file",
    "ls",
    "read_file",
    "read_todos",
    "write_file",
    "write_todos",
]
