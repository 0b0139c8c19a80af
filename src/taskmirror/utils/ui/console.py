"""Shared Rich console with the taskmirror colour theme."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

# Named styles used in formatter markup, e.g. "[success]Success:[/success]"
TASKMIRROR_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "notice": "yellow",
        "header": "bold cyan",
        "muted": "dim",
        "active": "cyan",
        "completed": "green",
    }
)


@lru_cache(maxsize=1)
def get_console() -> Console:
    return Console(theme=TASKMIRROR_THEME)
