"""Tests for settings, errors and questionnaire input parsing."""

from datetime import date

from daily_sage.clients.questionnaire import _parse_date, _parse_float, _valid_date, _valid_time
from daily_sage.config import BackendKind, Settings
from daily_sage.exceptions import InvalidTransitionError, NotAuthenticatedError


class TestSettings:
    """Tests for environment-driven settings."""

    def test_mock_mode_without_uri(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DAILY_SAGE_MONGO_URI", raising=False)
        monkeypatch.setenv("DAILY_SAGE_DATA_DIR", str(tmp_path))

        settings = Settings()

        assert settings.backend == BackendKind.LOCAL
        assert settings.db_path == tmp_path / "daily_sage.db"

    def test_remote_with_uri(self, monkeypatch):
        monkeypatch.setenv("DAILY_SAGE_MONGO_URI", "mongodb://localhost:27017")
        monkeypatch.setenv("DAILY_SAGE_MONGO_DB", "sage_test")

        settings = Settings()

        assert settings.backend == BackendKind.REMOTE
        assert settings.mongo_db == "sage_test"

    def test_api_key_read_without_prefix(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        settings = Settings()

        assert settings.openai_api_key == "sk-env"
        assert settings.generation_enabled is True

    def test_generation_disabled_without_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert Settings(_env_file=None).generation_enabled is False


class TestErrors:
    """Tests for API error payloads."""

    def test_invalid_transition_payload(self):
        error = InvalidTransitionError("Already at the first step", state="Basic Vitals")

        assert error.status_code == 409
        assert error.to_dict() == {
            "error": {
                "code": "INVALID_TRANSITION",
                "message": "Already at the first step",
                "details": {"state": "Basic Vitals"},
            }
        }

    def test_details_omitted_when_empty(self):
        assert "details" not in NotAuthenticatedError().to_dict()["error"]


class TestQuestionnaireInput:
    """Tests for terminal answer parsing."""

    def test_parse_float(self):
        assert _parse_float("72.5") == 72.5
        assert _parse_float("") is None
        assert _parse_float("tall") is None

    def test_parse_date(self):
        assert _parse_date("1990-05-17") == date(1990, 5, 17)
        assert _parse_date("17/05/1990") is None

    def test_valid_date(self):
        assert _valid_date("") is True
        assert _valid_date("1990-05-17") is True
        assert _valid_date("yesterday") == "Use the YYYY-MM-DD format"

    def test_valid_time(self):
        assert _valid_time("") is True
        assert _valid_time("07:30") is True
        assert _valid_time("24:00") == "Use the HH:MM format"
        assert _valid_time("7pm") == "Use the HH:MM format"
