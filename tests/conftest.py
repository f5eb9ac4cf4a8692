import json
import subprocess

import pytest


VITE_PACKAGE_JSON = {
    "name": "demo-app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "lint": "eslint .",
    },
    "dependencies": {"react": "^18.3.1", "react-dom": "^18.3.1"},
    "devDependencies": {"vite": "^5.4.0", "eslint": "^9.9.0"},
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("A11Y_BASE_URL", "A11Y_NODE_VERSION", "A11Y_BRANCHES"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def vite_project(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps(VITE_PACKAGE_JSON, indent=2), encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_installs(monkeypatch):
    """Replace subprocess.run in the package manager module; returns the recorded calls."""
    calls = []

    def fake_run(args, cwd=None, capture_output=False, text=False):
        calls.append({"args": list(args), "cwd": cwd})
        return subprocess.CompletedProcess(args, 0, stdout="added 1 package\n", stderr="")

    monkeypatch.setattr("a11y_wizard.package_manager.subprocess.run", fake_run)
    return calls


VITE_ESLINT_CONFIG = """\
import js from '@eslint/js'
import globals from 'globals'
import reactHooks from 'eslint-plugin-react-hooks'

export default [
  { ignores: ['dist'] },
  {
    files: ['**/*.{js,jsx}'],
    plugins: {
      'react-hooks': reactHooks,
    },
    rules: {
      ...js.configs.recommended.rules,
    },
  },
]
"""
