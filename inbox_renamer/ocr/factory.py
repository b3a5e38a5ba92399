from inbox_renamer.config.settings import Settings
from inbox_renamer.ocr.base import BaseOcrEngine
from inbox_renamer.ocr.models import RecognitionRequest
from inbox_renamer.ocr.tesseract_adapter import TesseractOcrEngine


class OcrEngineFactory:
    """Creates the configured OCR adapter and its recognition request."""

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        return TesseractOcrEngine(tesseract_cmd=settings.tesseract_cmd)

    @classmethod
    def request(cls, settings: Settings) -> RecognitionRequest:
        return RecognitionRequest(
            languages=tuple(settings.ocr_languages),
            accurate=True,
            language_correction=True,
        )
