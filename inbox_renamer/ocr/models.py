from dataclasses import dataclass


@dataclass(frozen=True)
class RecognitionRequest:
    """Options passed to the OCR engine for one page image."""

    languages: tuple[str, ...] = ("deu", "eng")  # primary model first
    accurate: bool = True
    language_correction: bool = True


@dataclass(frozen=True)
class TextRegion:
    """One recognized line of text with its best transcription."""

    text: str
    confidence: float
