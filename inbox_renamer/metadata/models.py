from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DocumentMetadata:
    """Subject and date inferred from a document's text."""

    subject: str | None
    date: date | None
    raw_text: str
