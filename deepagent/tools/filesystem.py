"""Virtual filesystem tools.

The filesystem is the flat ``files`` mapping in agent state (absolute path to
full content). The helpers below are pure functions over that mapping; the
``@tool`` wrappers read it from injected state, turn workspace errors into
messages and return ``files`` updates holding only the touched path, so that
several writes in one turn combine through ``file_reducer``.
"""
from typing import Annotated

from langchain_core.messages import ToolMessage
from langchain_core.tools import tool, InjectedToolCallId
from langgraph.prebuilt import InjectedState
from langgraph.types import Command

from ..console import console
from ..errors import AmbiguousMatchError, NotFoundError, RangeError, WorkspaceError
from ..prompts import (
    EDIT_FILE_DESCRIPTION,
    LS_DESCRIPTION,
    READ_FILE_DESCRIPTION,
    WRITE_FILE_DESCRIPTION,
)
from ..state import DeepAgentState

DEFAULT_READ_LIMIT = 2000
MAX_LINE_LENGTH = 2000
LINE_NUMBER_WIDTH = 6
EMPTY_FILE_REMINDER = "System reminder: File exists but has empty contents"
NO_FILES_MESSAGE = "No files in the virtual filesystem"


def list_paths(files: dict[str, str] | None) -> list[str]:
    """Return every path in the filesystem, in insertion order."""
    return list((files or {}).keys())


def read_lines(
    files: dict[str, str] | None,
    file_path: str,
    offset: int = 0,
    limit: int = DEFAULT_READ_LIMIT,
) -> str:
    """Render lines ``[offset, offset + limit)`` of a file in ``cat -n`` format.

    Raises:
        NotFoundError: If ``file_path`` is not in ``files``.
        RangeError: If ``offset`` is at or past the last line.
    """
    files = files or {}
    if file_path not in files:
        raise NotFoundError(f"File '{file_path}' not found")

    content = files[file_path]
    if not content or not content.strip():
        return EMPTY_FILE_REMINDER

    lines = content.split("\n")
    offset = max(offset, 0)
    if offset >= len(lines):
        raise RangeError(offset, len(lines))

    end = min(offset + max(limit, 0), len(lines))
    return "\n".join(
        f"{number:>{LINE_NUMBER_WIDTH}}\t{lines[number - 1][:MAX_LINE_LENGTH]}"
        for number in range(offset + 1, end + 1)
    )


def replace_in_content(content: str, old_string: str, new_string: str, replace_all: bool = False) -> str:
    """Literal string replacement with a uniqueness check.

    Raises:
        NotFoundError: If ``old_string`` is empty or absent from ``content``.
        AmbiguousMatchError: If ``old_string`` occurs more than once and
            ``replace_all`` is false.
    """
    if not old_string:
        raise NotFoundError("old_string must be a non-empty string")
    occurrences = content.count(old_string)
    if occurrences == 0:
        raise NotFoundError(f"String not found in file: '{old_string}'")
    if replace_all:
        return content.replace(old_string, new_string)
    if occurrences > 1:
        raise AmbiguousMatchError(old_string, occurrences)
    return content.replace(old_string, new_string, 1)


def edit_file_delta(
    files: dict[str, str] | None,
    file_path: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
) -> dict[str, str]:
    """Return the ``files`` update for an edit, touching only ``file_path``."""
    files = files or {}
    if file_path not in files:
        raise NotFoundError(f"File '{file_path}' not found")
    return {file_path: replace_in_content(files[file_path], old_string, new_string, replace_all)}


def _files_update(file_path: str, delta: dict[str, str], tool_call_id: str) -> Command:
    return Command(
        update={
            "files": delta,
            "messages": [
                ToolMessage(f"Updated file {file_path}", tool_call_id=tool_call_id)
            ],
        }
    )


@tool("ls", description=LS_DESCRIPTION)
def ls(state: Annotated[DeepAgentState, InjectedState]) -> str:
    """List all files in the virtual filesystem, one path per line."""
    paths = list_paths(state.get("files"))
    console.print(f"📁 Listing {len(paths)} virtual file(s)", style="info")
    return "\n".join(paths) if paths else NO_FILES_MESSAGE


@tool("read_file", parse_docstring=True, description=READ_FILE_DESCRIPTION)
def read_file(
    file_path: str,
    state: Annotated[DeepAgentState, InjectedState],
    offset: int = 0,
    limit: int = DEFAULT_READ_LIMIT,
) -> str:
    """Read a file from the virtual filesystem.

    Args:
        file_path (str): Absolute path of the file to read.
        state: Agent state (injected).
        offset (int): Line offset to start reading from. Defaults to 0.
        limit (int): Maximum number of lines to read. Defaults to 2000.

    Returns:
        str: Numbered lines, or an error message.
    """
    console.print(f"📄 Reading file: '[cyan]{file_path}[/cyan]'", style="info")
    try:
        return read_lines(state.get("files"), file_path, offset, limit)
    except WorkspaceError as e:
        return f"Error: {e}"


@tool("write_file", parse_docstring=True, description=WRITE_FILE_DESCRIPTION)
def write_file(
    file_path: str,
    content: str,
    state: Annotated[DeepAgentState, InjectedState],
    tool_call_id: Annotated[str, InjectedToolCallId],
) -> Command:
    """Create or overwrite a file in the virtual filesystem.

    Args:
        file_path (str): Absolute path of the file to write.
        content (str): The complete new content of the file.
        state: Agent state (injected).
        tool_call_id: Tool call ID (injected).

    Returns:
        Command to update the file in state.
    """
    action = "Overwriting" if file_path in (state.get("files") or {}) else "Creating"
    console.print(f"✍️  {action} file: '[cyan]{file_path}[/cyan]'", style="info")
    return _files_update(file_path, {file_path: content}, tool_call_id)


@tool("edit_file", parse_docstring=True, description=EDIT_FILE_DESCRIPTION)
def edit_file(
    file_path: str,
    old_string: str,
    new_string: str,
    state: Annotated[DeepAgentState, InjectedState],
    tool_call_id: Annotated[str, InjectedToolCallId],
    replace_all: bool = False,
) -> Command | str:
    """Replace an exact string in a file of the virtual filesystem.

    Args:
        file_path (str): Absolute path of the file to edit.
        old_string (str): Text to replace; must match exactly.
        new_string (str): Replacement text.
        state: Agent state (injected).
        tool_call_id: Tool call ID (injected).
        replace_all (bool): Replace every occurrence instead of exactly one. Defaults to False.

    Returns:
        Command to update the file in state, or an error message.
    """
    console.print(f"✏️  Editing file: '[cyan]{file_path}[/cyan]'", style="info")
    try:
        delta = edit_file_delta(state.get("files"), file_path, old_string, new_string, replace_all)
    except WorkspaceError as e:
        return f"Error: {e}"
    return _files_update(file_path, delta, tool_call_id)
