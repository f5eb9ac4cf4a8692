"""Pydantic models for wizard choices and settings."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Tool(str, Enum):
    AXE = "axe"
    PA11Y = "pa11y"
    LIGHTHOUSE = "lighthouse"


# Prompt order; scripts, jobs and `needs` lists all follow it.
TOOL_ORDER: List[Tool] = [Tool.AXE, Tool.PA11Y, Tool.LIGHTHOUSE]


def ordered_tools(tools) -> List[Tool]:
    """Return the distinct tools in canonical order."""
    wanted = {Tool(t) for t in tools}
    return [t for t in TOOL_ORDER if t in wanted]


class PackageManager(str, Enum):
    YARN = "yarn"
    PNPM = "pnpm"
    NPM = "npm"


class Preferences(BaseModel):
    selected_tools: List[Tool] = []
    ci: bool = False
    lint: bool = False

    @field_validator("selected_tools")
    @classmethod
    def _normalize_tools(cls, v):
        return ordered_tools(v)

    @model_validator(mode="after")
    def _ci_requires_tools(self):
        # No tools means there is nothing for a workflow to run
        if not self.selected_tools and self.ci:
            object.__setattr__(self, "ci", False)
        return self


class WizardSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "http://localhost:3000"
    node_version: str = "20"
    branches: List[str] = ["main"]

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("node_version", mode="before")
    @classmethod
    def _version_str(cls, v):
        return str(v)

    @field_validator("branches", mode="before")
    @classmethod
    def _split_branches(cls, v):
        if isinstance(v, str):
            v = [b.strip() for b in v.split(",")]
        return [b for b in v if b]

    @property
    def port(self) -> int:
        return urlparse(self.base_url).port or 3000


class Preset(BaseModel):
    """Pre-answered questions loaded from a YAML config file."""
    model_config = ConfigDict(extra="forbid")

    tools: Optional[List[Tool]] = None
    ci: Optional[bool] = None
    lint: Optional[bool] = None
    settings: Optional[WizardSettings] = None
