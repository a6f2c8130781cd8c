"""Top-level deep agent factory."""
from collections.abc import Sequence

from langchain.agents import create_agent

from .llm import get_llm
from .prompts import BASE_AGENT_PROMPT
from .state import DeepAgentState
from .subagents import AgentFactory, SubAgent, create_task_tool
from .tools import BUILTIN_TOOLS


def create_deep_agent(
    tools: Sequence = (),
    instructions: str = "",
    model=None,
    subagents: Sequence[SubAgent] = (),
    state_schema=DeepAgentState,
    checkpointer=None,
    agent_factory: AgentFactory | None = None,
):
    """Create an agent with the workspace tools and, optionally, sub-agents.

    Args:
        tools: Extra tools, added after the built-in workspace tools.
        instructions: Task-specific system prompt, placed before the base prompt.
        model: Chat model; defaults to ``get_llm()``.
        subagents: Sub-agent specs; when given, a ``task`` tool is added.
        state_schema: Agent state schema.
        checkpointer: Optional LangGraph checkpointer for multi-turn sessions.
        agent_factory: Builds sub-agents; defaults to ``create_agent``.
    """
    if model is None:
        model = get_llm()

    all_tools = [*BUILTIN_TOOLS, *tools]
    if subagents:
        all_tools.append(
            create_task_tool(
                subagents,
                tools,
                model,
                state_schema=state_schema,
                agent_factory=agent_factory,
            )
        )

    system_prompt = f"{instructions}\n\n{BASE_AGENT_PROMPT}" if instructions else BASE_AGENT_PROMPT
    return create_agent(
        model,
        tools=all_tools,
        system_prompt=system_prompt,
        state_schema=state_schema,
        checkpointer=checkpointer,
    )
