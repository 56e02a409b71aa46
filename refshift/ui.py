"""Shared Rich console for refshift output.

Usage:
    from refshift.ui import console
    console.print("[success]done[/success]")
"""

from rich.console import Console
from rich.theme import Theme

REFSHIFT_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Status goes to stderr; stdout is reserved for --print / --diff output
console = Console(theme=REFSHIFT_THEME, stderr=True)
