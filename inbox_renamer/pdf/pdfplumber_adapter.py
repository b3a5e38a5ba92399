from pathlib import Path

import pdfplumber
from PIL import Image

from inbox_renamer.pdf.base import BasePdfReader
from inbox_renamer.pdf.exceptions import PdfReadError

_POINTS_PER_INCH = 72


class PdfPlumberReader(BasePdfReader):
    """Reads and renders PDF pages using pdfplumber."""

    def page_texts(self, path: Path) -> list[str]:
        try:
            with pdfplumber.open(path) as pdf:
                return [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfReadError(f"pdfplumber could not read {path.name}: {exc}") from exc

    def render_page(self, path: Path, index: int, scale: float = 1.0) -> Image.Image | None:
        try:
            with pdfplumber.open(path) as pdf:
                if index >= len(pdf.pages):
                    return None
                page_image = pdf.pages[index].to_image(resolution=_POINTS_PER_INCH * scale)
                return page_image.original.convert("RGB")
        except Exception as exc:
            raise PdfReadError(
                f"pdfplumber could not render page {index} of {path.name}: {exc}"
            ) from exc
