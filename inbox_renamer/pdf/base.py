from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image


class BasePdfReader(ABC):
    """Contract for all PDF reading adapters."""

    @abstractmethod
    def page_texts(self, path: Path) -> list[str]:
        """Return the embedded text of every page, in page order.

        Pages without a text layer yield an empty string.

        Raises:
            PdfReadError: if the file cannot be opened as a PDF.
        """

    @abstractmethod
    def render_page(self, path: Path, index: int, scale: float = 1.0) -> Image.Image | None:
        """Render one page to an RGB image.

        Args:
            path: PDF file on disk.
            index: Zero-based page index.
            scale: Multiplier on the page's media box size (1.0 = 72 dpi).

        Returns:
            The rendered page, or None when the document has no such page.

        Raises:
            PdfReadError: if the file cannot be opened or the page fails to render.
        """
