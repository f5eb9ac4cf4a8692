"""Tool installation, package.json scripts and user-facing summaries."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from . import console
from .constants import (
    CONCURRENTLY_PACKAGE,
    RESOURCE_LINKS,
    SCRIPT_TEMPLATES,
    TOOL_PACKAGES,
    WCAG_LINK,
)
from .package_manager import install_packages, run_command_prefix
from .project import read_package_json, write_lighthouse_config, write_package_json
from .schema import PackageManager, Tool, WizardSettings, ordered_tools


def install_selected_tools(
    tools: List[Tool],
    package_manager: PackageManager,
    project_dir: Path = Path("."),
    settings: WizardSettings = None,
) -> None:
    tools = ordered_tools(tools)
    if not tools:
        return
    console.log_message("Installing accessibility testing tools", console.SECTION)
    console.log_message("This may take a moment depending on your internet connection.", console.INFO)
    install_packages([TOOL_PACKAGES[t] for t in tools], True, package_manager, cwd=project_dir)

    if Tool.LIGHTHOUSE in tools:
        console.log_message("Setting up Lighthouse configuration", console.SECTION)
        write_lighthouse_config(project_dir, settings or WizardSettings())
        console.log_message("Lighthouse config file created successfully!", console.SUCCESS)


def script_name(tool: Tool) -> str:
    return f"a11y:{Tool(tool).value}"


def add_package_scripts(
    package_data: Dict[str, Any],
    tools: List[Tool],
    package_manager: PackageManager,
    settings: WizardSettings = None,
) -> List[str]:
    """Add the a11y scripts to ``package_data`` in place; return the per-tool run commands."""
    tools = ordered_tools(tools)
    settings = settings or WizardSettings()
    scripts = package_data.get("scripts")
    if not isinstance(scripts, dict):
        scripts = package_data["scripts"] = {}
    if not tools:
        return []

    scripts["preview"] = "vite preview"
    for tool in tools:
        scripts[script_name(tool)] = SCRIPT_TEMPLATES[tool].format(url=settings.base_url)

    prefix = run_command_prefix(package_manager)
    commands = [f"{prefix} {script_name(t)}" for t in tools]
    scripts["a11y:all"] = "concurrently " + " ".join(f'"{c}"' for c in commands)
    return commands


def update_package_json_with_scripts(
    tools: List[Tool],
    package_manager: PackageManager,
    project_dir: Path = Path("."),
    settings: WizardSettings = None,
) -> str:
    """Write the scripts to package.json, install concurrently, return the run prefix."""
    data = read_package_json(project_dir)
    commands = add_package_scripts(data, tools, package_manager, settings)
    write_package_json(project_dir, data)
    if commands:
        install_packages([CONCURRENTLY_PACKAGE], True, package_manager, cwd=project_dir)
    return run_command_prefix(package_manager)


def display_configuration_summary(tools: List[Tool], ci: bool, lint: bool) -> None:
    names = ", ".join(Tool(t).value for t in tools) if tools else "none"
    console.log_message("Configuration Summary", console.SECTION)
    console.log_message(f"Selected tools: {names}", console.INFO)
    console.log_message(f"CI integration: {'enabled' if ci else 'disabled'}", console.INFO)
    console.log_message(f"Accessibility linting: {'enabled' if lint else 'disabled'}", console.INFO)


def display_next_steps(tools: List[Tool], prefix: str, ci: bool, lint: bool) -> None:
    console.log_message("Setup completed successfully!", console.HEADER)
    tools = ordered_tools(tools)
    if tools:
        console.log_message("Next steps:", console.SECTION)
        console.log_message("1. Start your development server", console.INFO)
        console.log_message("2. Run your accessibility tests:", console.INFO)
        for tool in tools:
            console.log_message(f"   • {prefix} {script_name(tool)}", console.COMMAND)
        if len(tools) > 1:
            console.log_message(f"   • {prefix} a11y:all (runs all tests)", console.COMMAND)
        if ci:
            console.log_message(
                "3. Commit .github/workflows/accessibility.yml to run the checks on every push and pull request",
                console.INFO,
            )

    if lint:
        console.log_message("Linting Setup Complete:", console.SECTION)
        console.log_message("Your editor will now show accessibility warnings in JSX files.", console.INFO)
        console.log_message(f"Run your linter to see accessibility issues: {prefix} lint", console.COMMAND)

    if tools:
        console.log_message("For more information about your selected tools:", console.SECTION)
        for tool in tools:
            console.log_message(RESOURCE_LINKS[tool], console.INFO)
        console.log_message(WCAG_LINK, console.INFO)
