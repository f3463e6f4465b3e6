"""
Training metric calculations.

Contains the session models, the per-variant calculators, and the
summary formatter.
"""

from .models import (
    DEFAULT_STEP_LENGTH,
    SWIMMING_STROKE_LENGTH,
    InvalidDurationError,
    Session,
    TrainingKind,
    TrainingSummary,
)
from .calculators import (
    CaloriesCalculator,
    Running,
    Swimming,
    Training,
    Walking,
    read_data,
)
from .formatting import (
    LABELS,
    SummaryLabels,
    UnknownLocaleError,
    format_summary,
    get_labels,
)

__all__ = [
    "DEFAULT_STEP_LENGTH",
    "SWIMMING_STROKE_LENGTH",
    "InvalidDurationError",
    "Session",
    "TrainingKind",
    "TrainingSummary",
    "CaloriesCalculator",
    "Running",
    "Swimming",
    "Training",
    "Walking",
    "read_data",
    "LABELS",
    "SummaryLabels",
    "UnknownLocaleError",
    "format_summary",
    "get_labels",
]
