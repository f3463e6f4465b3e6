"""
Command-line entry point.

Builds one sample session of each training kind and prints its summary
to standard output. Log records go to standard error so the report
stays clean.

    python -m trainingcalc.main
    REPORT_LOCALE=ru training-calc
"""

import logging
import sys
from datetime import timedelta

from pydantic import ValidationError

from .config.settings import get_settings
from .core.metrics import (
    DEFAULT_STEP_LENGTH,
    SWIMMING_STROKE_LENGTH,
    CaloriesCalculator,
    Running,
    Session,
    SummaryLabels,
    Swimming,
    TrainingKind,
    Walking,
    get_labels,
    read_data,
)

logger = logging.getLogger(__name__)


def build_sample_trainings(labels: SummaryLabels) -> list[CaloriesCalculator]:
    """Sample sessions for each training kind, swimming first."""
    swimming = Swimming(
        session=Session(
            training_type=labels.training_name(TrainingKind.SWIMMING),
            action=2000,
            step_length=SWIMMING_STROKE_LENGTH,
            duration=timedelta(minutes=90),
            weight=85,
        ),
        pool_length=50,
        pool_crossings=5,
    )

    walking = Walking(
        session=Session(
            training_type=labels.training_name(TrainingKind.WALKING),
            action=20000,
            step_length=DEFAULT_STEP_LENGTH,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
        ),
        height=185,
    )

    running = Running(
        session=Session(
            training_type=labels.training_name(TrainingKind.RUNNING),
            action=5000,
            step_length=DEFAULT_STEP_LENGTH,
            duration=timedelta(minutes=30),
            weight=85,
        ),
    )

    return [swimming, walking, running]


def main() -> int:
    """Main entry point for the application."""
    # Logging is not configured until settings load, so report to stderr
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr, flush=True)
        return 1

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )

    try:
        labels = get_labels(settings.report_locale)
        trainings = build_sample_trainings(labels)
        logger.info(
            "Printing training summaries",
            extra={"locale": settings.report_locale, "count": len(trainings)}
        )

        for training in trainings:
            print(read_data(training, labels))

    except (KeyError, ValueError) as e:
        logger.error("Failed to build training summaries: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
