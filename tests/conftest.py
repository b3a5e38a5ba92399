from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

PdfFactory = Callable[..., Path]


def write_pdf(path: Path, pages: Sequence[Sequence[str]]) -> Path:
    """Write a PDF with one page per entry, each line drawn as real text."""
    c = canvas.Canvas(str(path), pagesize=A4)
    for lines in pages:
        y = 780
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def make_pdf(tmp_path: Path) -> PdfFactory:
    """Factory writing PDFs into a scratch folder outside any watched root."""
    source_dir = tmp_path / "source"
    source_dir.mkdir()

    def _make(name: str, *pages: Sequence[str]) -> Path:
        return write_pdf(source_dir / name, pages or [[]])

    return _make


@pytest.fixture()
def sample_pdf(make_pdf: PdfFactory) -> Path:
    """Single-page PDF with known text content."""
    return make_pdf("sample.pdf", ["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf(make_pdf: PdfFactory) -> Path:
    """Two-page PDF with known text on each page."""
    return make_pdf("multi.pdf", ["Page one content"], ["Page two content"])


@pytest.fixture()
def blank_pdf(make_pdf: PdfFactory) -> Path:
    """Valid PDF with a single blank page and no text layer."""
    return make_pdf("blank.pdf", [])


@pytest.fixture()
def inbox(tmp_path: Path) -> Path:
    """Empty folder acting as the watched root."""
    root = tmp_path / "inbox"
    root.mkdir()
    return root
