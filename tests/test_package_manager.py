import subprocess

import pytest

from a11y_wizard.errors import PackageManagerError
from a11y_wizard.package_manager import (
    build_install_command,
    ci_install_command,
    detect_package_manager,
    install_packages,
    run_command_prefix,
)
from a11y_wizard.schema import PackageManager


def test_detect_defaults_to_npm(tmp_path):
    assert detect_package_manager(tmp_path) is PackageManager.NPM


@pytest.mark.parametrize(
    "lock_file,expected",
    [
        ("yarn.lock", PackageManager.YARN),
        ("pnpm-lock.yaml", PackageManager.PNPM),
        ("package-lock.json", PackageManager.NPM),
    ],
)
def test_detect_from_lock_file(tmp_path, lock_file, expected):
    (tmp_path / lock_file).write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) is expected


def test_detect_prefers_yarn_over_npm_lock(tmp_path):
    (tmp_path / "package-lock.json").write_text("{}", encoding="utf-8")
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) is PackageManager.YARN


def test_build_install_command():
    assert build_install_command(["pa11y", "@lhci/cli"], True, PackageManager.NPM) == [
        "npm", "install", "--save-dev", "pa11y", "@lhci/cli",
    ]
    assert build_install_command("pa11y", True, PackageManager.YARN) == ["yarn", "add", "-D", "pa11y"]
    assert build_install_command("pa11y", False, PackageManager.PNPM) == ["pnpm", "add", "pa11y"]


def test_run_prefix_and_ci_install():
    assert run_command_prefix(PackageManager.NPM) == "npm run"
    assert run_command_prefix(PackageManager.YARN) == "yarn"
    assert run_command_prefix("pnpm") == "pnpm"
    assert ci_install_command(PackageManager.NPM) == "npm ci"
    assert ci_install_command(PackageManager.YARN) == "yarn install --frozen-lockfile"


def test_install_packages_runs_command(fake_installs, tmp_path, capsys):
    assert install_packages(["pa11y"], True, PackageManager.YARN, cwd=tmp_path) is True
    assert fake_installs == [{"args": ["yarn", "add", "-D", "pa11y"], "cwd": str(tmp_path)}]
    out = capsys.readouterr().out
    assert "added 1 package" in out
    assert "Package installation completed" in out


def test_install_failure_is_a_warning(monkeypatch, capsys):
    def failing(args, **kwargs):
        return subprocess.CompletedProcess(args, 1, stdout="", stderr="ERR! network timeout")

    monkeypatch.setattr("a11y_wizard.package_manager.subprocess.run", failing)
    assert install_packages("pa11y", True, PackageManager.NPM) is False
    out = capsys.readouterr().out
    assert "completed with warnings" in out
    assert "network timeout" in out


def test_missing_executable_raises(monkeypatch, capsys):
    def missing(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr("a11y_wizard.package_manager.subprocess.run", missing)
    with pytest.raises(PackageManagerError, match="pnpm"):
        install_packages("pa11y", True, PackageManager.PNPM)
    # No half-open output frame is left behind
    assert "┌─" not in capsys.readouterr().out
