"""Package manager detection and install commands.

The API is intentionally small: the wizard only needs to know which manager a
project uses, how to install dev dependencies with it, and how scripts are run.
"""
from __future__ import annotations

import pathlib
import subprocess
from typing import List, Sequence, Union

import typer

from .console import format_external_output
from .constants import LOCK_FILES
from .errors import PackageManagerError
from .schema import PackageManager


def detect_package_manager(project_dir: Union[str, pathlib.Path] = ".") -> PackageManager:
    root = pathlib.Path(project_dir)
    for manager, lock_file in LOCK_FILES.items():
        if (root / lock_file).exists():
            return manager
    return PackageManager.NPM


def build_install_command(
    packages: Union[str, Sequence[str]],
    dev: bool = True,
    package_manager: PackageManager = PackageManager.NPM,
) -> List[str]:
    pkgs = [packages] if isinstance(packages, str) else list(packages)
    pm = PackageManager(package_manager)
    if pm is PackageManager.NPM:
        return ["npm", "install", *(["--save-dev"] if dev else []), *pkgs]
    return [pm.value, "add", *(["-D"] if dev else []), *pkgs]


def run_command_prefix(package_manager: PackageManager) -> str:
    """Prefix for running package.json scripts, e.g. ``npm run`` or ``yarn``."""
    pm = PackageManager(package_manager)
    return "npm run" if pm is PackageManager.NPM else pm.value


def ci_install_command(package_manager: PackageManager) -> str:
    """Lockfile-respecting install used inside CI."""
    return {
        PackageManager.YARN: "yarn install --frozen-lockfile",
        PackageManager.PNPM: "pnpm install --frozen-lockfile",
        PackageManager.NPM: "npm ci",
    }[PackageManager(package_manager)]


def install_packages(
    packages: Union[str, Sequence[str]],
    dev: bool = True,
    package_manager: PackageManager = PackageManager.NPM,
    cwd: Union[str, pathlib.Path] = ".",
) -> bool:
    """Install ``packages`` and echo the manager's output.

    Returns False when the install exits non-zero; that is reported as a
    warning and the wizard carries on. A missing executable raises
    :class:`PackageManagerError`.
    """
    args = build_install_command(packages, dev, package_manager)
    dim = dict(fg=typer.colors.BRIGHT_BLACK, dim=True)
    try:
        proc = subprocess.run(args, cwd=str(cwd), capture_output=True, text=True)
    except FileNotFoundError as e:
        raise PackageManagerError(
            f"Could not run '{args[0]}'. Is {args[0]} installed and on your PATH?"
        ) from e
    typer.echo()
    typer.secho("┌─ Package manager output:", **dim)
    output = (proc.stdout or "").strip()
    if output:
        typer.echo(format_external_output(output))
    if proc.returncode != 0:
        err = (proc.stderr or "").strip()
        if err:
            typer.echo(format_external_output(err))
        typer.secho("└─ Package installation completed with warnings", **dim)
        typer.echo()
        return False
    typer.secho("└─ Package installation completed", **dim)
    typer.echo()
    return True
