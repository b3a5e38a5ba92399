from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from inbox_renamer.acquisition.models import AcquiredText
from inbox_renamer.metadata.models import DocumentMetadata
from inbox_renamer.processor.models import MovedToReview, Renamed


@dataclass(slots=True)
class PipelineContext:
    path: Path
    root: Path
    acquired_text: AcquiredText | None = None
    metadata: DocumentMetadata | None = None
    outcome: Renamed | MovedToReview | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
