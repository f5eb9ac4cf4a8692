"""Accessibility linting setup (eslint-plugin-jsx-a11y).

The flat config is JavaScript, so it is patched textually rather than parsed:
an import (``require`` for CommonJS configs) is added, the plugin is registered in the first ``plugins`` object and
the recommended rules are spread into the first ``rules`` object. Each step is
skipped when its text is already present, so running the wizard twice leaves
the file unchanged.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Tuple

from . import console
from .constants import ESLINT_CONFIG_NAMES, LINT_PACKAGE
from .package_manager import install_packages
from .project import write_file
from .schema import PackageManager

IMPORT_LINE = 'import jsxA11y from "eslint-plugin-jsx-a11y";'
REQUIRE_LINE = 'const jsxA11y = require("eslint-plugin-jsx-a11y");'
PLUGIN_ENTRY = '"jsx-a11y": jsxA11y,'
RULES_ENTRY = "...jsxA11y.flatConfigs.recommended.rules,"

_IMPORTED_RE = re.compile(r"""import\s+jsxA11y\s+from\s+['"]eslint-plugin-jsx-a11y['"]""")
_REQUIRED_RE = re.compile(r"""jsxA11y\s*=\s*require\(\s*['"]eslint-plugin-jsx-a11y['"]\s*\)""")
_FIRST_IMPORT_RE = re.compile(r"^import\b", re.MULTILINE)
_FIRST_REQUIRE_RE = re.compile(r"^(?:const|let|var)\s+[^=\n]+=\s*require\(", re.MULTILINE)
_COMMONJS_RE = re.compile(r"\brequire\(|\bmodule\.exports\b")
_PLUGINS_RE = re.compile(r"plugins\s*:\s*\{")
_REGISTERED_RE = re.compile(r"""['"]jsx-a11y['"]\s*:\s*jsxA11y""")
_EXPORT_OBJECT_RE = re.compile(r"(?:export\s+default|module\.exports\s*=)\s*\{")
_RULES_RE = re.compile(r"rules\s*:\s*\{")


def _indent_at(content: str, pos: int) -> str:
    line_start = content.rfind("\n", 0, pos) + 1
    line = content[line_start:pos]
    return line[: len(line) - len(line.lstrip())]


def _insert_after(content: str, match: re.Match, entry: str) -> str:
    indent = _indent_at(content, match.start()) + "  "
    return content[: match.end()] + f"\n{indent}{entry}" + content[match.end():]


def is_commonjs(content: str) -> bool:
    """True for configs that use require/module.exports and no ES imports."""
    return not _FIRST_IMPORT_RE.search(content) and bool(_COMMONJS_RE.search(content))


def _add_plugin_binding(content: str, commonjs: bool) -> str:
    if _IMPORTED_RE.search(content) or _REQUIRED_RE.search(content):
        return content
    if commonjs:
        line, m = REQUIRE_LINE, _FIRST_REQUIRE_RE.search(content)
    else:
        line, m = IMPORT_LINE, _FIRST_IMPORT_RE.search(content)
    at = m.start() if m else 0
    return content[:at] + line + "\n" + content[at:]


def patch_eslint_config(content: str, commonjs: Optional[bool] = None) -> Tuple[str, bool]:
    """Return ``(new_content, registered)``.

    The plugin is bound with ``require`` when ``commonjs`` is True, or when it
    is None and the content itself is CommonJS.

    ``registered`` tells whether the jsx-a11y plugin is registered after
    patching; it is False when the config has neither a ``plugins`` object nor
    an ``export default {`` (or ``module.exports = {``) object to add one to.
    """
    if commonjs is None:
        commonjs = is_commonjs(content)
    content = _add_plugin_binding(content, commonjs)

    added = False
    if not _REGISTERED_RE.search(content):
        m = _PLUGINS_RE.search(content)
        if m:
            content = _insert_after(content, m, PLUGIN_ENTRY)
            added = True
        else:
            m = _EXPORT_OBJECT_RE.search(content)
            if m:
                block = f"\n  plugins: {{\n    {PLUGIN_ENTRY}\n  }},"
                content = content[: m.end()] + block + content[m.end():]
                added = True
    registered = added or bool(_REGISTERED_RE.search(content))

    if registered and RULES_ENTRY not in content:
        m = _RULES_RE.search(content)
        if m:
            content = _insert_after(content, m, RULES_ENTRY)
    return content, registered


def find_eslint_config(project_dir: Path) -> Optional[Path]:
    for name in ESLINT_CONFIG_NAMES:
        candidate = Path(project_dir) / name
        if candidate.exists():
            return candidate
    return None


def setup_accessibility_linting(package_manager: PackageManager, project_dir: Path = Path(".")) -> bool:
    """Install the plugin and patch the project's ESLint config.

    Returns True when the config now registers the plugin.
    """
    console.log_message("Setting up accessibility linting", console.SECTION)
    install_packages([LINT_PACKAGE], True, package_manager, cwd=project_dir)

    config_path = find_eslint_config(project_dir)
    if config_path is None:
        console.log_message(
            "Warning: No eslint.config.js found. Please configure eslint-plugin-jsx-a11y manually.",
            console.WARNING,
        )
        return False

    original = config_path.read_text(encoding="utf-8")
    commonjs = True if config_path.suffix == ".cjs" else None
    patched, registered = patch_eslint_config(original, commonjs=commonjs)
    if patched != original:
        write_file(config_path, patched)
    if registered:
        console.log_message(f"Updated {config_path.name} with jsx-a11y plugin", console.SUCCESS)
    else:
        console.log_message(
            f"Added the jsx-a11y import to {config_path.name}, but could not find where to register "
            "the plugin. Please add it to your config manually.",
            console.WARNING,
        )
    return registered
