from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Renamed:
    """File was renamed in place inside the watched folder."""

    new_path: Path


@dataclass(frozen=True)
class MovedToReview:
    """File was quarantined into the review folder."""

    review_path: Path


@dataclass(frozen=True)
class Failed:
    """Pipeline failed; the file stays where the failing step left it."""

    error: Exception


ProcessingOutcome = Renamed | MovedToReview | Failed


@dataclass(frozen=True)
class Queued:
    path: Path


@dataclass(frozen=True)
class Processing:
    path: Path


@dataclass(frozen=True)
class Completed:
    path: Path
    outcome: ProcessingOutcome


ProcessingStatus = Queued | Processing | Completed
