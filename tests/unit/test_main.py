"""
Tests for the command-line driver and its configuration.

Settings are cached per process, so every test that changes the
environment clears the cache before and after.
"""

import pytest
from pydantic import ValidationError

from trainingcalc.config.settings import Settings, get_settings
from trainingcalc.core.metrics import Running, Swimming, Walking, get_labels
from trainingcalc.main import build_sample_trainings, main


EXPECTED_ENGLISH_OUTPUT = (
    "Training type: Swimming\n"
    "Duration: 90 min\n"
    "Distance: 2.76 km.\n"
    "Avg speed: 0.17 km/h\n"
    "Calories burned: 323.00\n"
    "\n"
    "Training type: Walking\n"
    "Duration: 225 min\n"
    "Distance: 13.00 km.\n"
    "Avg speed: 3.47 km/h\n"
    "Calories burned: 15.80\n"
    "\n"
    "Training type: Running\n"
    "Duration: 30 min\n"
    "Distance: 3.25 km.\n"
    "Avg speed: 6.50 km/h\n"
    "Calories burned: 5.05\n"
    "\n"
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("REPORT_LOCALE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSampleTrainings:
    """Tests for the literal sample sessions."""

    def test_one_of_each_kind_in_order(self):
        trainings = build_sample_trainings(get_labels("en"))

        assert [type(t) for t in trainings] == [Swimming, Walking, Running]

    def test_sample_names_follow_locale(self):
        trainings = build_sample_trainings(get_labels("ru"))

        assert [t.session.training_type for t in trainings] == [
            "Плавание",
            "Ходьба",
            "Бег",
        ]


class TestMain:
    """Tests for the printed report."""

    def test_prints_english_report(self, capsys):
        assert main() == 0

        assert capsys.readouterr().out == EXPECTED_ENGLISH_OUTPUT

    def test_prints_russian_report_when_configured(self, monkeypatch, capsys):
        monkeypatch.setenv("REPORT_LOCALE", "ru")

        assert main() == 0

        out = capsys.readouterr().out
        assert out.startswith("Тип тренировки: Плавание\nДлительность: 90 мин\n")
        assert "Потрачено ккал: 5.05\n" in out

    def test_report_goes_to_stdout_only(self, capsys):
        main()

        assert "Training type" not in capsys.readouterr().err

    def test_unknown_locale_exits_with_error(self, monkeypatch, capsys):
        """A bad locale is reported on stderr instead of crashing."""
        monkeypatch.setenv("REPORT_LOCALE", "de")

        assert main() == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuration Error" in captured.err
        assert "report_locale" in captured.err

    def test_unknown_log_level_exits_with_error(self, monkeypatch, capsys):
        """A bad log level is rejected before logging is configured."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        assert main() == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuration Error" in captured.err
        assert "log_level" in captured.err


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.report_locale == "en"
        assert settings.log_level == "INFO"

    def test_locale_from_environment(self, monkeypatch):
        monkeypatch.setenv("REPORT_LOCALE", "ru")

        assert get_settings().report_locale == "ru"

    def test_unknown_locale_fails_validation(self, monkeypatch):
        monkeypatch.setenv("REPORT_LOCALE", "de")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_fails_validation(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
