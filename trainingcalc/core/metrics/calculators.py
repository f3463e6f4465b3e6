"""
Metric calculators for each kind of training.

Every variant wraps a recorded `Session` and adds only the fields its own
formulas need. Distance, speed, and the summary bundle are shared through
the `Training` base; each variant supplies its calorie formula, and
swimming also replaces the speed calculation with pool geometry.

The coefficients below are empirical fitted values. Keep them exact.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol

from .formatting import SummaryLabels, format_summary
from .models import (
    CM_IN_M,
    M_IN_KM,
    Session,
    TrainingKind,
    TrainingSummary,
)

logger = logging.getLogger(__name__)


RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79

WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029
KMH_IN_MSEC = 0.278

SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2


# ---------------------------------------------------------------------------
# Protocols (interfaces)
# ---------------------------------------------------------------------------

class CaloriesCalculator(Protocol):
    """
    Anything that can report calories and a summary.

    The driver and the formatter depend only on this, not on which
    variant they are handed.
    """

    def calories(self) -> float:
        ...

    def summary(self) -> TrainingSummary:
        ...


# ---------------------------------------------------------------------------
# Training variants
# ---------------------------------------------------------------------------

class Training(ABC):
    """
    Shared metric logic over a composed `Session`.

    Subclasses are frozen dataclasses declaring a `session` field plus
    their own extras, and must implement `calories()`.
    """

    kind: ClassVar[TrainingKind]
    session: Session

    def distance(self) -> float:
        """Distance covered in km."""
        return self.session.action * self.session.step_length / M_IN_KM

    def mean_speed(self) -> float:
        """Average speed over the whole session in km/h."""
        return self.distance() / self.session.duration_hours

    @abstractmethod
    def calories(self) -> float:
        """Calories burned in kcal."""
        ...

    def summary(self) -> TrainingSummary:
        summary = TrainingSummary(
            training_type=self.session.training_type,
            duration=self.session.duration,
            distance=self.distance(),
            speed=self.mean_speed(),
            calories=self.calories(),
        )
        logger.debug(
            "Computed training summary",
            extra={
                "kind": self.kind.value,
                "distance_km": summary.distance,
                "speed_kmh": summary.speed,
                "calories_kcal": summary.calories,
            }
        )
        return summary


@dataclass(frozen=True)
class Running(Training):
    """Running: calories grow with average speed."""
    kind: ClassVar[TrainingKind] = TrainingKind.RUNNING

    session: Session

    def calories(self) -> float:
        speed = self.mean_speed()
        return (
            (RUNNING_SPEED_MULTIPLIER * speed + RUNNING_SPEED_SHIFT)
            * self.session.weight / M_IN_KM
            * self.session.duration_hours
        )


@dataclass(frozen=True)
class Walking(Training):
    """
    Walking: calories depend on speed relative to the walker's height.

    Height is in centimeters. Speed is converted from km/h to m/s before
    it enters the formula.
    """
    kind: ClassVar[TrainingKind] = TrainingKind.WALKING

    session: Session
    height: float

    def calories(self) -> float:
        speed = self.mean_speed() * KMH_IN_MSEC
        height_in_meters = self.height / CM_IN_M
        weight = self.session.weight
        return (
            (
                WALKING_WEIGHT_MULTIPLIER * weight
                + (speed * speed / height_in_meters)
                * WALKING_SPEED_HEIGHT_MULTIPLIER * weight
            )
            * self.session.duration_hours
        )


@dataclass(frozen=True)
class Swimming(Training):
    """
    Swimming: speed comes from pool geometry, not stroke count.

    Distance still uses strokes times stroke length, so the reported
    distance and speed are measured independently.
    """
    kind: ClassVar[TrainingKind] = TrainingKind.SWIMMING

    session: Session
    pool_length: int  # meters
    pool_crossings: int

    def mean_speed(self) -> float:
        return (
            self.pool_length * self.pool_crossings / M_IN_KM
            / self.session.duration_hours
        )

    def calories(self) -> float:
        speed = self.mean_speed()
        return (
            (speed + SWIMMING_SPEED_SHIFT)
            * SWIMMING_WEIGHT_MULTIPLIER * self.session.weight
            * self.session.duration_hours
        )


# ---------------------------------------------------------------------------
# Convenience Functions
# ---------------------------------------------------------------------------

def read_data(
    training: CaloriesCalculator,
    labels: Optional[SummaryLabels] = None,
) -> str:
    """Compute the summary for a training and render it as text."""
    return format_summary(training.summary(), labels)
