"""
Deep Agent Assistant - Interactive Chat Bot

A Deep Agent that demonstrates:
- Planning capabilities with TODO tracking
- A virtual filesystem kept in agent state
- Subagent delegation with isolated context
- Persistent memory across conversation turns
"""

import pathlib

from langchain_core.messages import HumanMessage
from langgraph.checkpoint.memory import InMemorySaver

# Rich library for beautiful terminal output
from rich.panel import Panel
from rich.markdown import Markdown

# prompt_toolkit for cross-platform history support
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.formatted_text import HTML

from .config import agent_config
from .console import console, setup_logging
from .graph import create_deep_agent
from .llm import get_llm
from .prompts import (
    FILE_REVIEWER_PROMPT,
    GENERAL_PURPOSE_PROMPT,
    get_deep_agent_instructions,
)

# Define specialized sub-agents
FILE_REVIEWER_AGENT = {
    "name": "file-reviewer",
    "description": "Reviews files in the workspace and reports problems. Cannot modify files.",
    "prompt": FILE_REVIEWER_PROMPT,
    "tools": ["ls", "read_file"],
}

GENERAL_PURPOSE_AGENT = {
    "name": "general-purpose",
    "description": "Handles a self-contained sub-task with every tool, including further delegation.",
    "prompt": GENERAL_PURPOSE_PROMPT,
}


def main():
    """Run the interactive chat bot."""
    setup_logging()

    llm = get_llm()
    agent = create_deep_agent(
        instructions=get_deep_agent_instructions(),
        model=llm,
        subagents=[FILE_REVIEWER_AGENT, GENERAL_PURPOSE_AGENT],
        checkpointer=InMemorySaver(),
    )

    # Thread ID for conversation persistence
    thread_id = "deep_agent_session_1"
    config = {
        "configurable": {"thread_id": thread_id},
        "recursion_limit": agent_config.recursion_limit,
    }

    # Display header
    console.print()
    console.print(Panel.fit(
        "[bold cyan]🤖 Deep Agent Assistant[/bold cyan]\n\n"
        f"  • Powered by [green]{getattr(llm, 'model_name', None) or getattr(llm, 'model', 'unknown model')}[/green]\n"
        "[dim]A Deep Agent with:[/dim]\n"
        "  • 📋 Planning with TODO tracking\n"
        "  • 📁 Virtual file system\n"
        "  • 🔀 Sub-agent delegation\n"
        "  • 💾 Conversation memory\n\n"
        "[dim]Example requests:[/dim]\n"
        '  • "Draft a README for a CLI tool and save it to /README.md"\n'
        '  • "Ask the reviewer to check /README.md and fix what it finds"\n\n'
        "[yellow]Type 'quit', 'exit', or 'bye' to end.[/yellow]",
        border_style="cyan",
        padding=(1, 2)
    ))
    console.print()

    # Initialize prompt session with history
    history_file = pathlib.Path(agent_config.history_file).expanduser()
    session = PromptSession(history=FileHistory(str(history_file)))

    # Chat loop
    while True:
        try:
            user_input = session.prompt(HTML('\n<ansigreen><b>You:</b></ansigreen> ')).strip()
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]👋 Goodbye![/yellow]")
            break

        # Check for exit
        if user_input.lower() in ['quit', 'exit', 'bye', 'q']:
            console.print("\n[bold yellow]👋 Thanks for using Deep Agent! Goodbye![/bold yellow]")
            break

        # Skip empty input
        if not user_input:
            continue

        # Process with status indicator; todos and files persist through the checkpointer
        with console.status("[bold cyan]🤖 Processing...", spinner="dots"):
            try:
                result = agent.invoke({"messages": [HumanMessage(user_input)]}, config=config)
            except Exception as e:
                console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
                continue

        # Display response
        ai_response = result["messages"][-1].content
        console.print("\n[bold cyan]🤖 Bot:[/bold cyan]")
        console.print(Markdown(ai_response if isinstance(ai_response, str) else str(ai_response)))

        files = result.get("files") or {}
        if files:
            console.print(f"\n[dim]📁 Workspace: {', '.join(files)}[/dim]")

    console.print("\n")


if __name__ == "__main__":
    main()
