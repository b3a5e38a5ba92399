from dataclasses import dataclass


@dataclass(frozen=True)
class AcquiredText:
    """Raw text of a document and where it came from."""

    raw_text: str
    reliable: bool  # True for the embedded text layer, False for OCR output
