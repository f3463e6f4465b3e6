"""
Human-readable rendering of training summaries.

The report is five fixed lines. Only the words change between locales,
so the wording lives in `SummaryLabels` tables and the layout lives in
`format_summary`. The Russian table reproduces the labels the report
was first written with, character for character.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from .models import TrainingKind, TrainingSummary

DEFAULT_LOCALE = "en"


class UnknownLocaleError(KeyError):
    """Raised when no label table is registered for a locale."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


@dataclass(frozen=True)
class SummaryLabels:
    """Wording for one locale of the summary report."""
    training_type: str
    duration: str
    minutes_unit: str
    distance: str
    distance_unit: str
    speed: str
    speed_unit: str
    calories: str
    training_names: Mapping[TrainingKind, str]

    def training_name(self, kind: TrainingKind) -> str:
        return self.training_names[kind]


LABELS: dict[str, SummaryLabels] = {
    "en": SummaryLabels(
        training_type="Training type",
        duration="Duration",
        minutes_unit="min",
        distance="Distance",
        distance_unit="km.",
        speed="Avg speed",
        speed_unit="km/h",
        calories="Calories burned",
        training_names={
            TrainingKind.RUNNING: "Running",
            TrainingKind.WALKING: "Walking",
            TrainingKind.SWIMMING: "Swimming",
        },
    ),
    "ru": SummaryLabels(
        training_type="Тип тренировки",
        duration="Длительность",
        minutes_unit="мин",
        distance="Дистанция",
        distance_unit="км.",
        speed="Ср. скорость",
        speed_unit="км/ч",
        calories="Потрачено ккал",
        training_names={
            TrainingKind.RUNNING: "Бег",
            TrainingKind.WALKING: "Ходьба",
            TrainingKind.SWIMMING: "Плавание",
        },
    ),
}


def get_labels(locale: str = DEFAULT_LOCALE) -> SummaryLabels:
    """Look up the label table for a locale."""
    try:
        return LABELS[locale]
    except KeyError:
        raise UnknownLocaleError(
            f"No summary labels for locale {locale!r}. "
            f"Available: {', '.join(sorted(LABELS))}"
        ) from None


def format_minutes(minutes: float) -> str:
    """
    Shortest exact text for a minute count: 30, 90.5, 0.25.

    Durations are never rounded in the report.
    """
    if minutes.is_integer():
        return str(int(minutes))
    return repr(minutes)


def format_summary(
    summary: TrainingSummary,
    labels: Optional[SummaryLabels] = None,
) -> str:
    """Render a summary as five newline-terminated lines."""
    labels = labels or get_labels()
    return (
        f"{labels.training_type}: {summary.training_type}\n"
        f"{labels.duration}: {format_minutes(summary.duration_minutes)} {labels.minutes_unit}\n"
        f"{labels.distance}: {summary.distance:.2f} {labels.distance_unit}\n"
        f"{labels.speed}: {summary.speed:.2f} {labels.speed_unit}\n"
        f"{labels.calories}: {summary.calories:.2f}\n"
    )
