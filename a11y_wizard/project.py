"""Project checks and file helpers for the target front-end project."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import orjson

from .errors import ProjectError
from .schema import WizardSettings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
LIGHTHOUSE_TEMPLATE = TEMPLATES_DIR / "lighthouserc.json"

_CREATE_HINT = "To create a new React + Vite project, run:"
_CREATE_COMMAND = "npm create vite"


def read_package_json(project_dir: Path) -> Dict[str, Any]:
    return orjson.loads((Path(project_dir) / "package.json").read_bytes())


def write_package_json(project_dir: Path, data: Dict[str, Any]) -> None:
    write_file(Path(project_dir) / "package.json", orjson.dumps(data, option=orjson.OPT_INDENT_2) + b"\n")


def write_file(path: Path, content) -> Path:
    """Write text or bytes to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


def _declares(data: Dict[str, Any], name: str) -> bool:
    deps = data.get("dependencies") or {}
    dev_deps = data.get("devDependencies") or {}
    return name in deps or name in dev_deps


def validate_project(project_dir: Path) -> Dict[str, Any]:
    """Ensure ``project_dir`` is a React + Vite project and return its package.json."""
    if not (Path(project_dir) / "package.json").exists():
        raise ProjectError(
            "No package.json found. Please run this command in a Node.js project directory.",
            hint=_CREATE_HINT,
            command=_CREATE_COMMAND,
        )
    try:
        data = read_package_json(project_dir)
    except orjson.JSONDecodeError as e:
        raise ProjectError("Could not read package.json. Please ensure it's valid JSON.") from e
    if not isinstance(data, dict):
        raise ProjectError("Could not read package.json. Please ensure it's valid JSON.")
    if not (_declares(data, "react") and _declares(data, "vite")):
        raise ProjectError(
            "This tool only works with React + Vite projects.",
            hint=_CREATE_HINT,
            command=_CREATE_COMMAND,
        )
    return data


def write_lighthouse_config(project_dir: Path, settings: WizardSettings) -> Path:
    """Write lighthouserc.json from the packaged template, collecting ``settings.base_url``."""
    config = orjson.loads(LIGHTHOUSE_TEMPLATE.read_bytes())
    config.setdefault("ci", {}).setdefault("collect", {})["url"] = [settings.base_url]
    return write_file(
        Path(project_dir) / "lighthouserc.json",
        orjson.dumps(config, option=orjson.OPT_INDENT_2) + b"\n",
    )
