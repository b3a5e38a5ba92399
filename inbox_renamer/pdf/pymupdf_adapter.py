from pathlib import Path

import pymupdf
from PIL import Image

from inbox_renamer.pdf.base import BasePdfReader
from inbox_renamer.pdf.exceptions import PdfReadError


class PyMuPdfReader(BasePdfReader):
    """Reads and renders PDF pages using PyMuPDF."""

    def page_texts(self, path: Path) -> list[str]:
        try:
            with pymupdf.open(path) as doc:  # type: ignore[no-untyped-call]
                return [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfReadError(f"pymupdf could not read {path.name}: {exc}") from exc

    def render_page(self, path: Path, index: int, scale: float = 1.0) -> Image.Image | None:
        try:
            with pymupdf.open(path) as doc:  # type: ignore[no-untyped-call]
                if index >= doc.page_count:
                    return None
                pixmap = doc[index].get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=False)
                return Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
        except Exception as exc:
            raise PdfReadError(
                f"pymupdf could not render page {index} of {path.name}: {exc}"
            ) from exc
