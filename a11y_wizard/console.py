"""Styled console messages for the wizard.

Every message kind maps to a small formatter built on ``typer.style``; errors
are written to stderr, everything else to stdout.
"""
from __future__ import annotations

from typing import Callable, Dict

import typer

HEADER = "header"
SECTION = "section"
SUCCESS = "success"
INFO = "info"
WARNING = "warning"
ERROR = "error"
COMMAND = "command"
EXTERNAL = "external"

_WIDTH = 60


def _header(message: str) -> str:
    rule = "─" * _WIDTH
    lines = [f"╭{rule}╮", f"│ {message.ljust(_WIDTH - 2)} │", f"╰{rule}╯"]
    return "\n" + "\n".join(typer.style(line, fg=typer.colors.MAGENTA, bold=True) for line in lines) + "\n"


_FORMATTERS: Dict[str, Callable[[str], str]] = {
    HEADER: _header,
    SECTION: lambda m: "\n" + typer.style(m, bold=True),
    SUCCESS: lambda m: typer.style("✓ ", fg=typer.colors.GREEN, bold=True) + m,
    INFO: lambda m: typer.style("• ", fg=typer.colors.CYAN) + m,
    WARNING: lambda m: typer.style("⚠ ", fg=typer.colors.YELLOW) + m,
    ERROR: lambda m: typer.style("✗ ", fg=typer.colors.RED, bold=True) + m,
    COMMAND: lambda m: "  " + typer.style(m, fg=typer.colors.MAGENTA),
    EXTERNAL: lambda m: typer.style(f"  {m}", fg=typer.colors.BRIGHT_BLACK, dim=True),
}


def format_message(message: str, kind: str = INFO) -> str:
    formatter = _FORMATTERS.get(kind, _FORMATTERS[INFO])
    return formatter(message)


def log_message(message: str, kind: str = INFO) -> None:
    """Print ``message`` styled for ``kind``; unknown kinds fall back to info."""
    typer.echo(format_message(message, kind), err=(kind == ERROR))


def format_external_output(output: str) -> str:
    """Dim and indent the non-empty lines of a subprocess' output."""
    lines = [line.strip() for line in output.splitlines()]
    return "\n".join(format_message(line, EXTERNAL) for line in lines if line)


__all__ = ["log_message", "format_message", "format_external_output"]
