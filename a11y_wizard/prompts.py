"""Interactive collection of the user's choices."""
from __future__ import annotations

from typing import List, Optional

import typer

from .constants import TOOL_LABELS
from .schema import TOOL_ORDER, Preferences, Preset, Tool


def _ask(message: str, preset_value: Optional[bool], assume_yes: bool, default: bool = True) -> bool:
    if preset_value is not None:
        return preset_value
    if assume_yes:
        return default
    return typer.confirm(message, default=default)


def get_user_preferences(preset: Optional[Preset] = None, assume_yes: bool = False) -> Preferences:
    """Ask which tools to add, then about CI (only when a tool was picked) and linting.

    Questions answered by ``preset`` are skipped. With ``assume_yes`` the
    remaining questions take their defaults without prompting.
    """
    preset = preset or Preset()
    chosen = set(preset.tools) if preset.tools is not None else None
    selected: List[Tool] = []
    for tool in TOOL_ORDER:
        answer = (tool in chosen) if chosen is not None else None
        label = TOOL_LABELS[tool]
        if _ask(f"Would you like to add {label} accessibility testing?", answer, assume_yes):
            selected.append(tool)

    ci = False
    if selected:
        ci = _ask("Would you like to integrate them into your CI workflow?", preset.ci, assume_yes)
    lint = _ask("Enable accessibility linting (jsx-a11y)?", preset.lint, assume_yes)
    return Preferences(selected_tools=selected, ci=ci, lint=lint)
