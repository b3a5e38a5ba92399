from abc import ABC, abstractmethod

from PIL import Image

from inbox_renamer.ocr.models import RecognitionRequest, TextRegion


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image: Image.Image, request: RecognitionRequest) -> list[TextRegion]:
        """Recognize text regions on a rendered page.

        Args:
            image: Rendered page image.
            request: Language hints and accuracy options.

        Returns:
            Text regions in reading order, each with its top-ranked transcription.

        Raises:
            OcrError: if the engine is unavailable or recognition fails.
        """
