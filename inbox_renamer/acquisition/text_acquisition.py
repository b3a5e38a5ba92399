"""Turns a PDF into raw text: embedded text layer first, OCR of page 1 second."""

from pathlib import Path

from inbox_renamer.acquisition.exceptions import AcquisitionError
from inbox_renamer.acquisition.models import AcquiredText
from inbox_renamer.logging.logger import Log
from inbox_renamer.ocr.base import BaseOcrEngine
from inbox_renamer.ocr.exceptions import OcrError
from inbox_renamer.ocr.models import RecognitionRequest
from inbox_renamer.pdf.base import BasePdfReader
from inbox_renamer.pdf.exceptions import PdfReadError

_PAGE_SEPARATOR = "\n"


class TextAcquisition:
    """Acquires document text with a strict two-tier fallback."""

    def __init__(
        self,
        pdf_reader: BasePdfReader,
        ocr_engine: BaseOcrEngine,
        request: RecognitionRequest | None = None,
        render_scale: float = 1.0,
    ) -> None:
        self._pdf_reader = pdf_reader
        self._ocr_engine = ocr_engine
        self._request = request or RecognitionRequest()
        self._render_scale = render_scale

    def extract_text(self, path: Path) -> AcquiredText:
        """Return the document's text, marked reliable only if it was embedded.

        Raises:
            AcquisitionError: if the file cannot be opened as a PDF, has no
                pages, or OCR fails.
        """
        try:
            pages = self._pdf_reader.page_texts(path)
        except PdfReadError as exc:
            raise AcquisitionError(f"Unable to open PDF: {exc}") from exc

        embedded = "".join(
            text + _PAGE_SEPARATOR for text in pages if text.strip()
        )
        if embedded.strip():
            Log.debug(f"Using embedded text of {path.name} ({len(pages)} pages)")
            return AcquiredText(raw_text=embedded, reliable=True)

        Log.info(f"No embedded text in {path.name}, falling back to OCR")
        return self._recognize_first_page(path)

    def _recognize_first_page(self, path: Path) -> AcquiredText:
        try:
            image = self._pdf_reader.render_page(path, 0, self._render_scale)
        except PdfReadError as exc:
            raise AcquisitionError(f"Unable to render first page: {exc}") from exc
        if image is None:
            raise AcquisitionError(f"Empty PDF document: {path.name}")

        try:
            regions = self._ocr_engine.recognize(image, self._request)
        except OcrError as exc:
            raise AcquisitionError(f"Text recognition failed: {exc}") from exc

        Log.debug(f"OCR found {len(regions)} text regions in {path.name}")
        return AcquiredText(
            raw_text="\n".join(region.text for region in regions),
            reliable=False,
        )
