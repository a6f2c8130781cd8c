"""Reducer and update-folding tests."""
from langchain_core.messages import HumanMessage, ToolMessage

from deepagent.state import apply_update, file_reducer, fold_updates, todo_reducer


def test_file_reducer_union_right_wins():
    left = {"/a.txt": "old", "/b.txt": "b"}
    right = {"/a.txt": "new", "/c.txt": "c"}

    assert file_reducer(left, right) == {"/a.txt": "new", "/b.txt": "b", "/c.txt": "c"}
    assert left == {"/a.txt": "old", "/b.txt": "b"}
    assert right == {"/a.txt": "new", "/c.txt": "c"}


def test_file_reducer_missing_sides():
    files = {"/a.txt": "a"}
    assert file_reducer(files, None) is files
    assert file_reducer(None, files) == files
    assert file_reducer(None, None) == {}


def test_todo_reducer_replaces_wholesale():
    old = [{"content": "x", "status": "pending"}]
    new = [{"content": "y", "status": "completed"}]

    assert todo_reducer(old, new) == new
    assert todo_reducer(old, []) == []
    assert todo_reducer(old, None) == old


def test_apply_update_leaves_input_state_untouched():
    state = {"messages": [], "todos": [], "files": {"/a.txt": "a"}}

    merged = apply_update(state, {"files": {"/b.txt": "b"}})

    assert merged["files"] == {"/a.txt": "a", "/b.txt": "b"}
    assert state["files"] == {"/a.txt": "a"}


def test_apply_update_appends_messages():
    state = {"messages": [HumanMessage("hi", id="1")], "files": {}}

    merged = apply_update(state, {"messages": [ToolMessage("ok", tool_call_id="c1", id="2")]})

    assert [m.content for m in merged["messages"]] == ["hi", "ok"]
    assert len(state["messages"]) == 1


def test_apply_update_message_with_same_id_replaces():
    state = {"messages": [HumanMessage("draft", id="1")]}

    merged = apply_update(state, {"messages": [HumanMessage("final", id="1")]})

    assert [m.content for m in merged["messages"]] == ["final"]


def test_apply_update_none_is_noop():
    state = {"messages": [], "files": {"/a.txt": "a"}}
    assert apply_update(state, None) == state


def test_fold_updates_in_call_order():
    state = {"messages": [], "todos": [], "files": {}}
    updates = [
        {"files": {"/a.txt": "first"}},
        {"files": {"/b.txt": "b"}},
        {"files": {"/a.txt": "second"}},
        {"todos": [{"content": "plan", "status": "pending"}]},
        {"todos": []},
    ]

    final = fold_updates(state, updates)

    assert final["files"] == {"/a.txt": "second", "/b.txt": "b"}
    assert list(final["files"]) == ["/a.txt", "/b.txt"]
    assert final["todos"] == []


def test_fold_updates_disjoint_writes_commute():
    state = {"files": {}}
    a = {"files": {"/a.txt": "a"}}
    b = {"files": {"/b.txt": "b"}}

    assert fold_updates(state, [a, b])["files"] == fold_updates(state, [b, a])["files"]
