from collections.abc import Sequence
from pathlib import Path

from inbox_renamer.acquisition.text_acquisition import TextAcquisition
from inbox_renamer.config.settings import Settings
from inbox_renamer.logging.logger import Log
from inbox_renamer.metadata.inference import MetadataInference
from inbox_renamer.ocr.factory import OcrEngineFactory
from inbox_renamer.pdf.factory import PdfReaderFactory
from inbox_renamer.processor.models import MovedToReview, Renamed
from inbox_renamer.processor.pipeline import PipelineContext, PipelineStep
from inbox_renamer.processor.steps import AcquireTextStep, InferMetadataStep, RenameStep
from inbox_renamer.renaming.renamer import Renamer


class Processor:
    """Runs one document through the pipeline: acquire -> infer -> rename."""

    def __init__(self, root: Path, steps: Sequence[PipelineStep]) -> None:
        self._root = root
        self._steps = tuple(steps)

    def process(self, path: Path) -> Renamed | MovedToReview:
        """Process a single document.

        Raises:
            AcquisitionError: if no text can be obtained from the document.
            FilesystemError: if the rename or quarantine move fails.
        """
        Log.info(f"Processing {path.name}")
        context = PipelineContext(path=path, root=self._root)
        for step in self._steps:
            context = step.run(context)
        if context.outcome is None:
            raise ValueError(f"Pipeline produced no outcome for {path.name}")
        return context.outcome


def build_processor(settings: Settings, root: Path) -> Processor:
    """Build a Processor with all required adapters."""
    text_acquisition = TextAcquisition(
        pdf_reader=PdfReaderFactory.create(settings),
        ocr_engine=OcrEngineFactory.create(settings),
        request=OcrEngineFactory.request(settings),
        render_scale=settings.ocr_render_scale,
    )
    renamer = Renamer(
        review_folder_name=settings.review_folder_name,
        extension=settings.document_extension,
        max_filename_length=settings.max_filename_length,
    )
    steps: list[PipelineStep] = [
        AcquireTextStep(text_acquisition),
        InferMetadataStep(MetadataInference()),
        RenameStep(renamer),
    ]
    return Processor(root=root, steps=steps)
