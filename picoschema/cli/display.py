"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Error messages with their location
- Success/failure indicators
"""

import json
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from picoschema.validation import ValidationError

console = Console()
# Diagnostics go to stderr so stdout stays pipeable JSON.
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    err_console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    err_console.print(f"[red]✗[/red] {message}", highlight=False)


def print_json(data: Any, title: Optional[str] = None, indent: int = 2) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
        indent: Indentation used when ``data`` is not already a string
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=indent)

    if title:
        syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
        console.print(Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan"))
    else:
        # Plain output keeps stdout valid JSON when redirected.
        console.print_json(json_str, indent=indent)


def print_validation_errors(errors: List[ValidationError]) -> None:
    """
    Print meta-schema errors in a formatted list.

    Args:
        errors: Errors from ``check_schema``
    """
    if not errors:
        return

    err_console.print()
    err_console.print("[bold red]Schema Errors:[/bold red]")
    for error in errors:
        err_console.print(f"  [red]•[/red] {escape(error.path)}: {escape(error.message)}", highlight=False)
    err_console.print()
