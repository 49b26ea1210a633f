import pytest
from pydantic import ValidationError

from writewise.modules.assessment.profiles import SCORING_PROFILES
from writewise.settings import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("SCORING_PROFILE", raising=False)
    monkeypatch.delenv("MIN_SUBMISSION_CHARS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.SCORING_PROFILE == "corrected"
    assert settings.MIN_SUBMISSION_CHARS == 10
    assert settings.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCORING_PROFILE", " Legacy ")
    monkeypatch.setenv("MIN_SUBMISSION_CHARS", "25")

    settings = get_settings()
    assert settings.SCORING_PROFILE == "legacy"
    assert settings.MIN_SUBMISSION_CHARS == 25


def test_unknown_profile_rejected(monkeypatch):
    monkeypatch.setenv("SCORING_PROFILE", "experimental")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("SCORING_PROFILE", "legacy")
    assert get_settings().SCORING_PROFILE == "corrected"

    reset_settings()
    assert get_settings().SCORING_PROFILE == "legacy"


def test_every_registered_profile_is_accepted():
    for name in SCORING_PROFILES:
        assert Settings(_env_file=None, SCORING_PROFILE=name.upper()).SCORING_PROFILE == name


def test_unused_environment_is_ignored(monkeypatch):
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("RAILWAY_ENVIRONMENT", "production")

    settings = Settings(_env_file=None)
    assert set(settings.model_dump()) == {"SCORING_PROFILE", "MIN_SUBMISSION_CHARS", "LOG_LEVEL"}
