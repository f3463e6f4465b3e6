"""
Domain models for training metrics.

These models represent the raw recorded session and the derived,
display-ready summary. Both are frozen values: a session is fixed when
it is recorded, and a summary is computed once and never mutated.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

M_IN_KM = 1000
SECONDS_IN_MINUTE = 60
CM_IN_M = 100
SECONDS_IN_HOUR = 3600

DEFAULT_STEP_LENGTH = 0.65  # meters per stride
SWIMMING_STROKE_LENGTH = 1.38  # meters per stroke


class InvalidDurationError(ValueError):
    """Raised when a session is recorded with a non-positive duration."""
    pass


class TrainingKind(Enum):
    """The training variants we know how to calculate."""
    RUNNING = "running"
    WALKING = "walking"
    SWIMMING = "swimming"


@dataclass(frozen=True)
class Session:
    """
    Raw measurements shared by every kind of training.

    `action` is the number of steps (running, walking) or strokes
    (swimming). Speeds are derived from `duration`, so it must be
    positive; a zero-length session is rejected here rather than
    producing infinite speeds later.
    """
    training_type: str
    action: int
    step_length: float
    duration: timedelta
    weight: float

    def __post_init__(self) -> None:
        if self.duration <= timedelta(0):
            raise InvalidDurationError(
                f"Session duration must be positive, got {self.duration}"
            )

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()

    @property
    def duration_hours(self) -> float:
        return self.duration_seconds / SECONDS_IN_HOUR

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / SECONDS_IN_MINUTE


@dataclass(frozen=True)
class TrainingSummary:
    """
    Derived metrics for one session.

    Distance is in km, speed in km/h, calories in kcal. Values are kept
    at full precision; rounding belongs to the formatter.
    """
    training_type: str
    duration: timedelta
    distance: float
    speed: float
    calories: float

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / SECONDS_IN_MINUTE
