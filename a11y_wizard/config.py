"""Settings and preset loading.

Precedence, lowest first: built-in defaults, environment variables (a ``.env``
file is honoured), then the ``settings`` block of the YAML preset.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from .constants import CONFIG_FILE_NAME
from .errors import ConfigError
from .schema import Preset, WizardSettings

ENV_VARS = {
    "base_url": "A11Y_BASE_URL",
    "node_version": "A11Y_NODE_VERSION",
    "branches": "A11Y_BRANCHES",
}


def settings_from_env() -> dict:
    return {field: os.environ[var] for field, var in ENV_VARS.items() if os.environ.get(var)}


def load_preset(path: Path) -> Preset:
    try:
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    try:
        return Preset(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def load_config(project_dir: Path, config_file: Optional[Path] = None) -> Tuple[Preset, WizardSettings]:
    """Return the preset (possibly empty) and the effective settings for a run."""
    load_dotenv(Path(project_dir) / ".env")
    if config_file is None:
        default = Path(project_dir) / CONFIG_FILE_NAME
        config_file = default if default.exists() else None
    preset = load_preset(config_file) if config_file else Preset()
    values = settings_from_env()
    if preset.settings is not None:
        values.update(preset.settings.model_dump(exclude_unset=True))
    try:
        settings = WizardSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
    return preset, settings
