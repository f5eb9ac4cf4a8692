import pytest

from a11y_wizard import prompts
from a11y_wizard.schema import Preferences, Preset, Tool


@pytest.fixture
def answers(monkeypatch):
    """Feed canned answers to typer.confirm and record the questions asked."""
    asked = []
    queue = []

    def fake_confirm(message, default=True):
        asked.append(message)
        return queue.pop(0)

    monkeypatch.setattr(prompts.typer, "confirm", fake_confirm)
    return asked, queue


def test_all_questions_asked_in_order(answers):
    asked, queue = answers
    queue.extend([True, False, True, True, False])
    prefs = prompts.get_user_preferences()
    assert prefs == Preferences(selected_tools=[Tool.AXE, Tool.LIGHTHOUSE], ci=True, lint=False)
    assert asked == [
        "Would you like to add Axe accessibility testing?",
        "Would you like to add Pa11y accessibility testing?",
        "Would you like to add Lighthouse accessibility testing?",
        "Would you like to integrate them into your CI workflow?",
        "Enable accessibility linting (jsx-a11y)?",
    ]


def test_ci_not_asked_without_tools(answers):
    asked, queue = answers
    queue.extend([False, False, False, True])
    prefs = prompts.get_user_preferences()
    assert prefs.selected_tools == []
    assert prefs.ci is False
    assert prefs.lint is True
    assert len(asked) == 4
    assert "CI workflow" not in " ".join(asked)


def test_preset_answers_skip_questions(answers):
    asked, queue = answers
    queue.append(True)
    prefs = prompts.get_user_preferences(Preset(tools=["pa11y"], lint=False))
    assert asked == ["Would you like to integrate them into your CI workflow?"]
    assert prefs == Preferences(selected_tools=[Tool.PA11Y], ci=True, lint=False)


def test_assume_yes_takes_defaults(answers):
    asked, _ = answers
    prefs = prompts.get_user_preferences(assume_yes=True)
    assert asked == []
    assert prefs.selected_tools == [Tool.AXE, Tool.PA11Y, Tool.LIGHTHOUSE]
    assert prefs.ci and prefs.lint


def test_preferences_normalise_tools_and_ci():
    prefs = Preferences(selected_tools=["lighthouse", "axe", "axe"], ci=True)
    assert prefs.selected_tools == [Tool.AXE, Tool.LIGHTHOUSE]
    assert Preferences(selected_tools=[], ci=True).ci is False
