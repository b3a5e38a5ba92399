from inbox_renamer.config.settings import Settings
from inbox_renamer.logging.logger import Log
from inbox_renamer.pdf.base import BasePdfReader
from inbox_renamer.pdf.pdfplumber_adapter import PdfPlumberReader
from inbox_renamer.pdf.pymupdf_adapter import PyMuPdfReader


class PdfReaderFactory:
    """Maps the ``PDF_ENGINE`` setting to a reader implementation."""

    ADAPTERS: dict[str, type[BasePdfReader]] = {
        "pdfplumber": PdfPlumberReader,
        "pymupdf": PyMuPdfReader,
    }

    @classmethod
    def engines(cls) -> list[str]:
        return sorted(cls.ADAPTERS)

    @classmethod
    def create(cls, settings: Settings) -> BasePdfReader:
        engine = settings.pdf_engine.strip().lower()
        try:
            reader_cls = cls.ADAPTERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine {settings.pdf_engine!r}, "
                f"expected one of: {', '.join(cls.engines())}"
            ) from None
        Log.debug(f"Reading documents with {reader_cls.__name__}")
        return reader_cls()
