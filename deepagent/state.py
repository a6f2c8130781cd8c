"""Shared agent state definitions and the reducers that merge tool updates."""
from typing import Annotated, Any, Iterable, Literal, NotRequired
from typing_extensions import TypedDict
from langchain.agents import AgentState
from langgraph.graph.message import add_messages

class Todo(TypedDict):
    """A structured task item for tracking progress."""
    content: str
    status: Literal["pending", "in_progress", "completed"]

def file_reducer(left, right):
    """Merge two file dictionaries, right side takes precedence."""
    if left is None:
        return right or {}
    elif right is None:
        return left
    else:
        return {**left, **right}

def todo_reducer(left, right):
    """Replace the todo list wholesale; an empty list is still a replacement."""
    if right is not None:
        return right
    return left if left is not None else []

class DeepAgentState(AgentState):
    """Extended agent state with TODO tracking and virtual file system."""
    todos: Annotated[NotRequired[list[Todo]], todo_reducer]
    files: Annotated[NotRequired[dict[str, str]], file_reducer]


REDUCERS = {
    "messages": add_messages,
    "todos": todo_reducer,
    "files": file_reducer,
}


def apply_update(state: dict[str, Any], update: dict[str, Any] | None) -> dict[str, Any]:
    """Return a new state with one tool update folded in.

    Each key of ``update`` goes through its field reducer; keys without a
    reducer overwrite. ``state`` itself is left untouched. Messages go through
    LangGraph's ``add_messages``, which appends but replaces an existing
    message carrying the same ``id``; tool messages get fresh ids, so in
    practice every tool result is appended.
    """
    merged = dict(state)
    for key, value in (update or {}).items():
        reducer = REDUCERS.get(key)
        if reducer is None:
            merged[key] = value
        elif key == "messages":
            merged[key] = reducer(state.get(key) or [], value)
        else:
            merged[key] = reducer(state.get(key), value)
    return merged


def fold_updates(state: dict[str, Any], updates: Iterable[dict[str, Any] | None]) -> dict[str, Any]:
    """Apply several tool updates in call order."""
    for update in updates:
        state = apply_update(state, update)
    return state
