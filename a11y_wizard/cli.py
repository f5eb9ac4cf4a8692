"""Typer CLI that adds accessibility tooling to a React + Vite project."""
from pathlib import Path

import typer
from dotenv import load_dotenv

from . import console, eslint_config, package_manager, prompts, scaffold, workflow
from .config import load_config
from .constants import WORKFLOW_PATH
from .project import validate_project

# .env in the working directory; load_config also reads the target project's .env
load_dotenv()

app = typer.Typer(add_completion=False)


def run_wizard(project_dir: Path, config_file: Path = None, assume_yes: bool = False) -> None:
    console.log_message("Welcome to Ally Wizard!", console.HEADER)

    validate_project(project_dir)
    console.log_message("Detected React + Vite project", console.SUCCESS)

    preset, settings = load_config(project_dir, config_file)
    pm = package_manager.detect_package_manager(project_dir)
    console.log_message(f"Using {pm.value} as package manager", console.INFO)

    prefs = prompts.get_user_preferences(preset, assume_yes=assume_yes)
    tools = prefs.selected_tools
    scaffold.display_configuration_summary(tools, prefs.ci, prefs.lint)

    scaffold.install_selected_tools(tools, pm, project_dir, settings)

    if tools:
        console.log_message("Adding accessibility scripts to package.json", console.SECTION)
        scaffold.update_package_json_with_scripts(tools, pm, project_dir, settings)
        console.log_message("Successfully added accessibility scripts to package.json", console.SUCCESS)

    if prefs.ci and tools:
        console.log_message("Setting up CI/CD workflow for accessibility testing", console.SECTION)
        workflow.generate_ci_workflow(tools, pm, project_dir, settings)
        console.log_message(f"Accessibility workflow generated successfully! ({WORKFLOW_PATH})", console.SUCCESS)

    if prefs.lint:
        eslint_config.setup_accessibility_linting(pm, project_dir)

    scaffold.display_next_steps(tools, package_manager.run_command_prefix(pm), prefs.ci, prefs.lint)


@app.command()
def init(
    project_dir: Path = typer.Option(Path("."), "--project-dir", "-C", help="Project to configure (default: current directory)."),
    config: Path = typer.Option(None, "--config", help="YAML file with pre-answered questions and settings."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept the default answer for every question."),
):
    """Interactively add axe, pa11y and Lighthouse checks, a CI workflow and jsx-a11y linting."""
    try:
        run_wizard(project_dir, config, assume_yes=yes)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        console.log_message(f"An error occurred: {e}", console.ERROR)
        hint = getattr(e, "hint", None)
        if hint:
            console.log_message(hint, console.INFO)
            if getattr(e, "command", None):
                console.log_message(e.command, console.COMMAND)
        else:
            console.log_message("Please check your setup and try again.", console.INFO)
        raise typer.Exit(code=1)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
