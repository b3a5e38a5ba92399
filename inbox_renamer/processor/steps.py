from inbox_renamer.acquisition.text_acquisition import TextAcquisition
from inbox_renamer.logging.logger import Log
from inbox_renamer.metadata.inference import MetadataInference
from inbox_renamer.processor.pipeline import PipelineContext, PipelineStep
from inbox_renamer.renaming.renamer import Renamer


class AcquireTextStep(PipelineStep):
    def __init__(self, text_acquisition: TextAcquisition) -> None:
        self._text_acquisition = text_acquisition

    def run(self, context: PipelineContext) -> PipelineContext:
        context.acquired_text = self._text_acquisition.extract_text(context.path)
        source = "embedded" if context.acquired_text.reliable else "OCR"
        Log.info(
            f"Acquired {len(context.acquired_text.raw_text)} chars ({source}) "
            f"from {context.path.name}"
        )
        return context


class InferMetadataStep(PipelineStep):
    def __init__(self, inference: MetadataInference) -> None:
        self._inference = inference

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.acquired_text is None:
            raise ValueError("PipelineContext.acquired_text must be set before inference")
        context.metadata = self._inference.infer(context.acquired_text, context.path)
        Log.info(
            f"Metadata for {context.path.name}: subject={context.metadata.subject!r}, "
            f"date={context.metadata.date}"
        )
        return context


class RenameStep(PipelineStep):
    def __init__(self, renamer: Renamer) -> None:
        self._renamer = renamer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.metadata is None:
            raise ValueError("PipelineContext.metadata must be set before renaming")
        context.outcome = self._renamer.apply(context.metadata, context.path, context.root)
        return context
