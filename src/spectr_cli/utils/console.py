"""Console utility functions for formatting and output."""

from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'created': '+',
    'updated': '~',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
    'preview': '👀',
}

_console = None


def _get_console() -> Console:
    """Get the shared Rich console, created on first use."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: Optional[str] = None):
    """Echo message with Rich formatting."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    style = f"bold {color}" if bold else color
    _get_console().print(message, style=style)


def _rich_success(message: str, symbol: Optional[str] = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: Optional[str] = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: Optional[str] = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: Optional[str] = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_panel(content: str, title: Optional[str] = None, style: str = "cyan"):
    """Display content in a Rich panel."""
    _get_console().print(Panel(content, title=title, border_style=style))


def _create_files_table(files_data: Iterable[Tuple[str, str]], title: str = "Files") -> Table:
    """Create a Rich table of (path, status) rows."""
    table = Table(title=f"📋 {title}", show_header=True, header_style="bold cyan")
    table.add_column("File", style="bold white")
    table.add_column("Status", style="white")

    for path, status in files_data:
        table.add_row(path, status)

    return table
