"""Deep agents: planning, a virtual filesystem and sub-agent delegation on LangGraph."""
from .errors import (
    AmbiguousMatchError,
    DelegationFailure,
    NotFoundError,
    RangeError,
    WorkspaceError,
)
from .graph import create_deep_agent
from .state import DeepAgentState, Todo, apply_update, file_reducer, fold_updates, todo_reducer
from .subagents import SubAgent, SubAgentRegistry, create_task_tool, dispatch_task
from .tools import BUILTIN_TOOLS, edit_file, ls, read_file, read_todos, write_file, write_todos

__all__ = [
    "AmbiguousMatchError",
    "BUILTIN_TOOLS",
    "DeepAgentState",
    "DelegationFailure",
    "NotFoundError",
    "RangeError",
    "SubAgent",
    "SubAgentRegistry",
    "Todo",
    "WorkspaceError",
    "apply_update",
    "create_deep_agent",
    "create_task_tool",
    "dispatch_task",
    "edit_file",
    "file_reducer",
    "fold_updates",
    "ls",
    "read_file",
    "read_todos",
    "todo_reducer",
    "write_file",
    "write_todos",
]
