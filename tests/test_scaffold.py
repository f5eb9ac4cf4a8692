import json

from a11y_wizard.scaffold import (
    add_package_scripts,
    display_configuration_summary,
    display_next_steps,
    install_selected_tools,
    update_package_json_with_scripts,
)
from a11y_wizard.schema import PackageManager, Tool, WizardSettings


def test_scripts_for_selected_tools():
    data = {"scripts": {"dev": "vite"}}
    commands = add_package_scripts(data, [Tool.PA11Y, Tool.AXE], PackageManager.NPM)
    assert commands == ["npm run a11y:axe", "npm run a11y:pa11y"]
    assert data["scripts"] == {
        "dev": "vite",
        "preview": "vite preview",
        "a11y:axe": "axe http://localhost:3000 --exit",
        "a11y:pa11y": "pa11y --standard WCAG2AA --timeout 30000 --wait 2000 --include-warnings http://localhost:3000",
        "a11y:all": 'concurrently "npm run a11y:axe" "npm run a11y:pa11y"',
    }


def test_single_tool_still_gets_all_script():
    data = {}
    add_package_scripts(data, [Tool.LIGHTHOUSE], PackageManager.YARN)
    assert data["scripts"]["a11y:lighthouse"] == "lhci autorun"
    assert data["scripts"]["a11y:all"] == 'concurrently "yarn a11y:lighthouse"'


def test_no_tools_leaves_scripts_alone():
    data = {"scripts": {"dev": "vite"}}
    assert add_package_scripts(data, [], PackageManager.NPM) == []
    assert data == {"scripts": {"dev": "vite"}}


def test_scripts_use_configured_base_url():
    data = {}
    add_package_scripts(data, [Tool.AXE], PackageManager.PNPM, WizardSettings(base_url="http://127.0.0.1:4173"))
    assert data["scripts"]["a11y:axe"] == "axe http://127.0.0.1:4173 --exit"


def test_update_package_json_writes_and_installs_concurrently(vite_project, fake_installs):
    prefix = update_package_json_with_scripts([Tool.AXE], PackageManager.YARN, vite_project)
    assert prefix == "yarn"
    written = (vite_project / "package.json").read_text(encoding="utf-8")
    assert written.endswith("\n")
    data = json.loads(written)
    assert data["scripts"]["a11y:axe"] == "axe http://localhost:3000 --exit"
    assert data["scripts"]["build"] == "vite build"
    assert data["dependencies"]["react"] == "^18.3.1"
    assert fake_installs[-1]["args"] == ["yarn", "add", "-D", "concurrently"]


def test_install_selected_tools(vite_project, fake_installs):
    settings = WizardSettings(base_url="http://localhost:5000")
    install_selected_tools([Tool.LIGHTHOUSE, Tool.AXE], PackageManager.NPM, vite_project, settings)
    assert fake_installs == [
        {"args": ["npm", "install", "--save-dev", "@axe-core/cli", "@lhci/cli"], "cwd": str(vite_project)}
    ]
    lhrc = json.loads((vite_project / "lighthouserc.json").read_text(encoding="utf-8"))
    assert lhrc["ci"]["collect"]["url"] == ["http://localhost:5000"]
    assert lhrc["ci"]["upload"]["outputDir"] == "./lhci_reports"


def test_install_nothing_for_empty_selection(vite_project, fake_installs):
    install_selected_tools([], PackageManager.NPM, vite_project)
    assert fake_installs == []
    assert not (vite_project / "lighthouserc.json").exists()


def test_summary_and_next_steps_output(capsys):
    display_configuration_summary([], False, True)
    out = capsys.readouterr().out
    assert "Selected tools: none" in out
    assert "CI integration: disabled" in out
    assert "Accessibility linting: enabled" in out

    display_next_steps([Tool.AXE], "npm run", False, False)
    out = capsys.readouterr().out
    assert "npm run a11y:axe" in out
    assert "a11y:all (runs all tests)" not in out
    assert "Axe: https://www.deque.com/axe/" in out
    assert "WCAG Guidelines" in out
    assert "Pa11y:" not in out

    display_next_steps([Tool.AXE, Tool.PA11Y], "yarn", True, True)
    out = capsys.readouterr().out
    assert "yarn a11y:all (runs all tests)" in out
    assert "yarn lint" in out
