"""End-to-end runs of ``create_deep_agent`` against a scripted model."""
from langchain_core.messages import AIMessage, HumanMessage, ToolMessage

from deepagent import create_deep_agent

from .conftest import ScriptedChatModel

WRITER = {
    "name": "writer",
    "description": "Writes files",
    "prompt": "You write files.",
}


def tool_call(name, args, call_id):
    return {"name": name, "args": args, "id": call_id, "type": "tool_call"}


def test_parent_writes_and_edits_files():
    model = ScriptedChatModel(messages=iter([
        AIMessage("", tool_calls=[
            tool_call("write_file", {"file_path": "/a.txt", "content": "l1\nl2"}, "c1"),
            tool_call("write_file", {"file_path": "/b.txt", "content": "b"}, "c2"),
        ]),
        AIMessage("", tool_calls=[
            tool_call("edit_file", {"file_path": "/a.txt", "old_string": "l2", "new_string": "L2"}, "c3"),
        ]),
        AIMessage("", tool_calls=[
            tool_call("read_file", {"file_path": "/a.txt"}, "c4"),
        ]),
        AIMessage("done"),
    ]))
    agent = create_deep_agent(model=model)

    result = agent.invoke({"messages": [HumanMessage("write some files")]})

    assert result["files"] == {"/a.txt": "l1\nL2", "/b.txt": "b"}
    read_result = [m for m in result["messages"] if isinstance(m, ToolMessage) and m.tool_call_id == "c4"]
    assert read_result[0].content == "     1\tl1\n     2\tL2"
    assert result["messages"][-1].content == "done"


def test_delegation_folds_back_files_only():
    parent_plan = [{"content": "delegate the poem", "status": "in_progress"}]
    model = ScriptedChatModel(messages=iter([
        # parent
        AIMessage("", tool_calls=[tool_call("write_todos", {"todos": parent_plan}, "p1")]),
        AIMessage("", tool_calls=[
            tool_call("task", {"description": "Write a poem to /poem.md", "subagent_type": "writer"}, "p2"),
        ]),
        # child
        AIMessage("", tool_calls=[
            tool_call("write_todos", {"todos": [{"content": "child step", "status": "pending"}]}, "k1"),
            tool_call("write_file", {"file_path": "/poem.md", "content": "roses"}, "k2"),
        ]),
        AIMessage("wrote /poem.md"),
        # parent
        AIMessage("all done"),
    ]))
    agent = create_deep_agent(model=model, subagents=[WRITER])

    result = agent.invoke({"messages": [HumanMessage("get me a poem")]})

    assert result["files"] == {"/poem.md": "roses"}
    assert result["todos"] == parent_plan
    task_results = [m for m in result["messages"] if isinstance(m, ToolMessage) and m.tool_call_id == "p2"]
    assert len(task_results) == 1
    assert task_results[0].content == "wrote /poem.md"
    assert not any(isinstance(m, ToolMessage) and m.tool_call_id in ("k1", "k2") for m in result["messages"])
    assert result["messages"][-1].content == "all done"


def test_subagents_are_built_with_injected_factory(factory):
    create_deep_agent(
        model=ScriptedChatModel(messages=iter([])),
        subagents=[WRITER],
        agent_factory=factory,
    )

    assert "task" in factory.agents["You write files."].tool_names
