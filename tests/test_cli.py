"""Tests for the command line interface."""

import importlib
from unittest.mock import AsyncMock

import pytest
from click.testing import CliRunner

from daily_sage.cli import main
from daily_sage.config import get_settings
from daily_sage.generation.client import ContentGenerator


class FakeQuestionnaire:
    """Answers every step without prompting."""

    def __init__(self, flow):
        self.flow = flow

    async def run(self):
        self.flow.update(display_name="Sam", height=170, weight=70)
        result = None
        while result is None:
            result = self.flow.next()
        return result


@pytest.fixture
def runner(tmp_path, monkeypatch, sample_routines, sample_tips):
    """CLI runner on an isolated mock-mode data directory."""
    monkeypatch.setenv("DAILY_SAGE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("DAILY_SAGE_MONGO_URI", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(ContentGenerator, "generate_routines", AsyncMock(return_value=sample_routines))
    monkeypatch.setattr(ContentGenerator, "generate_daily_tips", AsyncMock(return_value=sample_tips))
    onboard_module = importlib.import_module("daily_sage.commands.onboard")
    monkeypatch.setattr(onboard_module, "OnboardingQuestionnaire", FakeQuestionnaire)
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _onboarded(runner):
    runner.invoke(main, ["login"])
    result = runner.invoke(main, ["onboard"])
    assert result.exit_code == 0, result.output
    return result


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ("init", "login", "onboard", "today", "toggle", "journal", "history", "serve"):
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_init_creates_database(self, runner, tmp_path):
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert (tmp_path / "daily_sage.db").exists()
        assert "OPENAI_API_KEY is not set" in result.output

    def test_status_signed_out(self, runner):
        result = runner.invoke(main, ["status"])

        assert result.exit_code == 0
        assert "Not signed in." in result.output
        assert "login" in result.output

    def test_today_requires_login(self, runner):
        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "daily-sage login" in result.output

    def test_login_then_onboard_hint(self, runner):
        result = runner.invoke(main, ["login"])

        assert result.exit_code == 0
        assert "Signed in as Demo User" in result.output
        assert "daily-sage onboard" in result.output

    def test_today_requires_profile(self, runner):
        runner.invoke(main, ["login"])

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "daily-sage onboard" in result.output

    def test_onboard(self, runner):
        result = _onboarded(runner)

        assert "Profile saved (BMI 24.2)" in result.output

        status = runner.invoke(main, ["status"])
        assert "View:      dashboard" in status.output

    def test_today(self, runner):
        _onboarded(runner)

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 0, result.output
        assert "morning-walk" in result.output
        assert "Move every hour" in result.output
        assert "Source: NHS" in result.output

    def test_toggle(self, runner):
        _onboarded(runner)

        result = runner.invoke(main, ["toggle", "morning-walk"])

        assert result.exit_code == 0, result.output
        assert "marked done" in result.output

        result = runner.invoke(main, ["toggle", "morning-walk"])
        assert "marked not done" in result.output

    def test_toggle_unknown_routine(self, runner):
        _onboarded(runner)

        result = runner.invoke(main, ["toggle", "no-such-item"])

        assert result.exit_code == 1
        assert "No routine item" in result.output

    def test_journal_and_history(self, runner):
        _onboarded(runner)

        result = runner.invoke(
            main,
            ["journal", "--water-add", "3", "--water-remove", "1", "--mood", "4", "--sleep", "7.5", "--notes", "Walked"],
        )

        assert result.exit_code == 0, result.output
        assert "Journal saved successfully!" in result.output
        assert "Water:  2 cup(s)" in result.output
        assert "Sleep:  7.5 h" in result.output

        history = runner.invoke(main, ["history"])
        assert history.exit_code == 0
        assert "Walked" in history.output
        assert "Total: 1 entry" in history.output

    def test_journal_rejects_quarter_hours(self, runner):
        _onboarded(runner)

        result = runner.invoke(main, ["journal", "--sleep", "7.25"])

        assert result.exit_code == 2
        assert "half-hour" in result.output

    def test_journal_refuses_to_save_unloaded_entry(self, runner):
        _onboarded(runner)
        ContentGenerator.generate_routines.side_effect = RuntimeError("no network")

        result = runner.invoke(main, ["journal", "--mood", "5"])

        assert result.exit_code == 1
        assert "Could not load everything" in result.output

    def test_logout(self, runner):
        runner.invoke(main, ["login"])

        result = runner.invoke(main, ["logout"])

        assert result.exit_code == 0
        assert "Not signed in." in runner.invoke(main, ["status"]).output
