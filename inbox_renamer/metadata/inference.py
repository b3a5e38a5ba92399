from collections.abc import Callable
from datetime import date
from pathlib import Path

from inbox_renamer.acquisition.models import AcquiredText
from inbox_renamer.filesystem.timestamps import creation_date
from inbox_renamer.logging.logger import Log
from inbox_renamer.metadata.dates import DateDetector
from inbox_renamer.metadata.models import DocumentMetadata
from inbox_renamer.metadata.subject import SubjectDetector


class MetadataInference:
    """Infers subject and date from acquired text; never raises."""

    def __init__(
        self,
        subject_detector: SubjectDetector | None = None,
        date_detector: DateDetector | None = None,
        fallback_date: Callable[[Path], date | None] = creation_date,
    ) -> None:
        self._subject_detector = subject_detector or SubjectDetector()
        self._date_detector = date_detector or DateDetector()
        self._fallback_date = fallback_date

    def infer(self, text: AcquiredText, path: Path) -> DocumentMetadata:
        normalized = text.raw_text.replace("\r", "")
        lines = [line for line in normalized.split("\n") if line]
        subject = self._subject_detector.find_subject(lines)

        match = self._date_detector.find_date(normalized)
        if match is None:
            found_date = self._fallback_date(path)
        else:
            found_date = match.value
            if found_date is None:
                Log.warning(f"Ignoring invalid date '{match.text}' in {path.name}")

        Log.debug(
            f"Inferred subject={subject!r} date={found_date} for {path.name} "
            f"(reliable text: {text.reliable})"
        )
        return DocumentMetadata(subject=subject, date=found_date, raw_text=normalized)
