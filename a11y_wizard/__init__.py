"""a11y_wizard

Interactive scaffolder that adds accessibility tooling to a React + Vite project.

Primary entrypoints:
 - cli.py (Typer CLI)
 - scaffold.py (tool installs + package.json scripts)
 - workflow.py (GitHub Actions workflow generation)
 - eslint_config.py (jsx-a11y lint config patch)
"""

__all__ = [
    "eslint_config",
    "scaffold",
    "workflow",
]
