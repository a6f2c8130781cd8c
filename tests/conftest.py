"""Shared fixtures: tool-call helpers and scripted stand-ins for agents and models."""
import pytest
from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import AIMessage


def call_tool(tool_, args, state=None, call_id="call_1"):
    """Invoke ``tool_`` the way the agent loop does, with an id and injected state."""
    if state is not None:
        args = {**args, "state": state}
    return tool_.invoke({"type": "tool_call", "name": tool_.name, "id": call_id, "args": args})


class FakeAgent:
    """Records each invocation and answers through ``behaviour(state)``."""

    def __init__(self, system_prompt, tools, behaviour):
        self.system_prompt = system_prompt
        self.tools = tools
        self.behaviour = behaviour
        self.calls = []

    @property
    def tool_names(self):
        return [t.name for t in self.tools]

    def invoke(self, state, config=None):
        self.calls.append((state, config))
        return self.behaviour(state)


def reply_with(text, files=None, todos=None):
    """Behaviour: answer ``text`` and optionally write files / replace todos."""
    def behaviour(state):
        result = {
            "messages": [*state["messages"], AIMessage(text)],
            "files": {**state["files"], **(files or {})},
            "todos": state["todos"] if todos is None else todos,
        }
        return result
    return behaviour


class AgentFactory:
    """Stand-in for ``create_agent``; behaviours are looked up by system prompt."""

    def __init__(self, behaviours=None):
        self.behaviours = behaviours or {}
        self.agents = {}

    def __call__(self, model, system_prompt, tools, state_schema):
        agent = FakeAgent(system_prompt, tools, self.behaviours.get(system_prompt, reply_with("done")))
        self.agents[system_prompt] = agent
        return agent


class ScriptedChatModel(GenericFakeChatModel):
    """Fake chat model that plays back a fixed list of replies, tool calls included."""

    def bind_tools(self, tools, **kwargs):
        return self


@pytest.fixture
def factory():
    return AgentFactory()


@pytest.fixture
def workspace():
    return {
        "messages": [],
        "todos": [{"content": "outline", "status": "in_progress"}],
        "files": {"/notes.md": "alpha\nbeta\ngamma"},
    }
