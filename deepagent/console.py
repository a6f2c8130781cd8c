"""Shared Rich console and logging configuration."""
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "bot": "bold cyan",
    "user": "bold green"
})

# specific global console instance to be used everywhere
console = Console(theme=custom_theme)


def setup_logging(level: int = logging.INFO) -> None:
    """Route stdlib logging through the shared console."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
