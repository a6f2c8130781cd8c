"""Planning tools for task breakdown."""
from typing import Annotated
from langchain_core.tools import tool, InjectedToolCallId
from langchain_core.messages import ToolMessage
from langgraph.prebuilt import InjectedState
from langgraph.types import Command
from ..console import console

from ..prompts import READ_TODOS_DESCRIPTION, WRITE_TODOS_DESCRIPTION
from ..state import DeepAgentState, Todo

STATUS_ICONS = {
    "pending": "⏳",
    "in_progress": "🔄",
    "completed": "✅",
}

@tool(
    "write_todos",
    parse_docstring=True,
    description=WRITE_TODOS_DESCRIPTION,
)
def write_todos(
    todos: list[Todo],
    tool_call_id: Annotated[str, InjectedToolCallId],
) -> Command:
    """Replace the TODO list in agent state.

    Args:
        todos (list[Todo]): The complete list of TODO items, each with 'content' and 'status'.
        tool_call_id: Tool call ID (injected).

    Returns:
        Command to update state with new TODOs.
    """
    todos = [dict(todo) for todo in todos]
    console.print("📋 Updating TODO list", style="info")
    console.print("\n".join(
        f"  {STATUS_ICONS.get(todo['status'], '❓')} {todo['content']}" for todo in todos
    ))

    return Command(
        update={
            "todos": todos,
            "messages": [
                ToolMessage(
                    f"Updated todo list to {todos}",
                    tool_call_id=tool_call_id
                )
            ],
        }
    )


@tool(
    "read_todos",
    parse_docstring=True,
    description=READ_TODOS_DESCRIPTION,
)
def read_todos(
    state: Annotated[DeepAgentState, InjectedState],
) -> str:
    """Read current TODOs from state.

    Args:
        state: Agent state (injected).

    Returns:
        str: Formatted TODO list.
    """
    todos = state.get("todos") or []

    if not todos:
        return "No TODOs currently set."

    result = "Current TODO list:\n"
    for i, todo in enumerate(todos, 1):
        status = todo.get("status", "pending")
        result += f"  {i}. {STATUS_ICONS.get(status, '❓')} [{status}] {todo.get('content', 'Unnamed')}\n"

    return result
