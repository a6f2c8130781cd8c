"""Utilities for creating and dispatching to sub-agents."""
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Annotated, Any, NotRequired, TypedDict

from langchain.agents import create_agent
from langchain_core.messages import ToolMessage
from langchain_core.tools import tool, InjectedToolCallId, BaseTool
from langgraph.errors import GraphBubbleUp
from langgraph.prebuilt import InjectedState
from langgraph.types import Command

from .config import agent_config
from .console import console
from .errors import DelegationFailure, NotFoundError
from .prompts import TASK_DESCRIPTION_PREFIX
from .state import DeepAgentState
from .tools import BUILTIN_TOOLS

logger = logging.getLogger(__name__)

class SubAgent(TypedDict):
    """Configuration for a specialized sub-agent."""
    name: str
    description: str
    prompt: str
    tools: NotRequired[list[str]]


# construct(model, system_prompt, tools, state_schema) -> runnable agent
AgentFactory = Callable[[Any, str, list[BaseTool], type], Any]


def default_agent_factory(model, system_prompt: str, tools: list[BaseTool], state_schema):
    return create_agent(
        model,
        system_prompt=system_prompt,
        tools=tools,
        state_schema=state_schema,
    )


def build_tool_catalog(tools) -> Mapping[str, BaseTool]:
    """Index tools by name; plain callables are wrapped with ``@tool``."""
    tools_by_name = {}
    for tool_ in tools:
        if not isinstance(tool_, BaseTool):
            tool_ = tool(tool_)
        tools_by_name[tool_.name] = tool_
    return MappingProxyType(tools_by_name)


class SubAgentRegistry(Mapping):
    """Read-only mapping of sub-agent name to a fully built nested agent.

    Every spec is resolved against the tool catalog and built once, at
    construction. The registry holds no per-run state, so one instance can
    serve any number of concurrent top-level invocations.
    """

    def __init__(
        self,
        subagents: Sequence[SubAgent],
        tools,
        model,
        state_schema=DeepAgentState,
        agent_factory: AgentFactory | None = None,
    ):
        self.catalog = build_tool_catalog(tools)
        factory = agent_factory or default_agent_factory

        specs = {}
        agents = {}
        for spec in subagents:
            name = spec["name"]
            if name in specs:
                raise ValueError(f"Duplicate sub-agent name: '{name}'")
            specs[name] = spec
            agents[name] = factory(model, spec["prompt"], self.resolve_tools(spec), state_schema)

        self.specs = MappingProxyType(specs)
        self._agents = MappingProxyType(agents)

    def resolve_tools(self, spec: SubAgent) -> list[BaseTool]:
        """Tools granted to ``spec``; no ``tools`` key grants the whole catalog."""
        if "tools" not in spec:
            return list(self.catalog.values())

        resolved = []
        for tool_name in spec["tools"]:
            if tool_name in self.catalog:
                resolved.append(self.catalog[tool_name])
            else:
                logger.warning(
                    "Tool '%s' not found for agent '%s'; skipping it", tool_name, spec["name"]
                )
        return resolved

    def __getitem__(self, name: str):
        return self._agents[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._agents)

    def __len__(self) -> int:
        return len(self._agents)

    def describe(self) -> str:
        return "\n".join(f"- {spec['name']}: {spec['description']}" for spec in self.specs.values())

    def run(self, name: str, task: str, state: Mapping[str, Any], recursion_limit: int | None = None) -> dict:
        """Run sub-agent ``name`` to completion on ``task``.

        The child starts from a snapshot of the caller's files and todos and a
        history holding only ``task``.

        Raises:
            NotFoundError: If ``name`` is not registered.
            DelegationFailure: If the nested run raises.
        """
        if name not in self._agents:
            raise NotFoundError(
                f"Agent '{name}' not found. Available agents: {', '.join(self._agents)}"
            )

        isolated_state = {
            "messages": [{"role": "user", "content": task}],
            "todos": list(state.get("todos") or []),
            "files": dict(state.get("files") or {}),
        }
        config = {"recursion_limit": recursion_limit} if recursion_limit else None

        try:
            return self._agents[name].invoke(isolated_state, config=config)
        except GraphBubbleUp:
            raise
        except Exception as e:
            raise DelegationFailure(name, task, e) from e


def _final_content(result: Mapping[str, Any]):
    messages = result.get("messages") or []
    if not messages:
        return "Task completed"
    last = messages[-1]
    return last.get("content", "") if isinstance(last, dict) else last.content


def _changed_files(before, after) -> dict[str, str]:
    # Unchanged snapshot paths are left out so they cannot undo sibling writes.
    before = before or {}
    return {
        path: content
        for path, content in (after or {}).items()
        if path not in before or before[path] != content
    }


def dispatch_task(
    registry: SubAgentRegistry,
    subagent_type: str,
    description: str,
    state: Mapping[str, Any],
    tool_call_id: str,
    recursion_limit: int | None = None,
) -> Command | str:
    """Delegate ``description`` to a registered sub-agent and fold back its result.

    Only the files the child created or changed flow back into the caller,
    together with one tool message carrying the child's final answer.
    Unknown agents and failed runs come back as error strings and leave files
    and todos untouched.
    """
    if subagent_type not in registry:
        return f"Error: Agent '{subagent_type}' not found. Available agents: {', '.join(registry)}"

    console.print(f"🤖 Delegating to [cyan]{subagent_type}[/cyan]: {description[:50]}...", style="info")

    try:
        result = registry.run(subagent_type, description, state, recursion_limit)
    except DelegationFailure as e:
        logger.warning("%s", e, exc_info=e.cause)
        console.print(f"❌ Sub-agent [cyan]{subagent_type}[/cyan] failed", style="error")
        return f"Error: {e}"

    console.print(f"✅ Sub-agent [cyan]{subagent_type}[/cyan] finished", style="success")

    update = {
        "messages": [
            ToolMessage(_final_content(result), tool_call_id=tool_call_id)
        ],
    }
    changed = _changed_files(state.get("files"), result.get("files"))
    if changed:
        update["files"] = changed
    return Command(update=update)


def create_task_tool(
    subagents: Sequence[SubAgent],
    tools=(),
    model=None,
    state_schema=DeepAgentState,
    agent_factory: AgentFactory | None = None,
    recursion_limit: int | None = None,
):
    """Create a task delegation tool for context isolation through sub-agents.

    The catalog seen by sub-agents is the built-in tools, then ``tools``, then
    the task tool itself, so an unrestricted sub-agent can delegate further.
    """
    subagents = list(subagents)
    if recursion_limit is None:
        recursion_limit = agent_config.recursion_limit
    registry = None

    @tool(
        "task",
        parse_docstring=True,
        description=f"{TASK_DESCRIPTION_PREFIX}\n" + "\n".join(
            f"- {a['name']}: {a['description']}" for a in subagents
        ),
    )
    def task(
        description: str,
        subagent_type: str,
        state: Annotated[state_schema, InjectedState],
        tool_call_id: Annotated[str, InjectedToolCallId],
    ):
        """Delegate a task to a sub-agent with isolated context.

        Args:
            description: Clear, self-contained description of the task to perform.
            subagent_type: Name of the sub-agent to use.
            state: Agent state (injected).
            tool_call_id: Tool call ID (injected).
        """
        return dispatch_task(registry, subagent_type, description, state, tool_call_id, recursion_limit)

    registry = SubAgentRegistry(
        subagents,
        [*BUILTIN_TOOLS, *tools, task],
        model,
        state_schema=state_schema,
        agent_factory=agent_factory,
    )
    return task
