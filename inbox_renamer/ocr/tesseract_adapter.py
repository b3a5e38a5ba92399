from collections.abc import Sequence

import pytesseract
from PIL import Image

from inbox_renamer.ocr.base import BaseOcrEngine
from inbox_renamer.ocr.exceptions import OcrError
from inbox_renamer.ocr.models import RecognitionRequest, TextRegion

_LSTM_ONLY = 1
_DEFAULT_ENGINE = 3
_AUTO_PAGE_SEGMENTATION = 3

_LineKey = tuple[int, int, int, int]


class TesseractOcrEngine(BaseOcrEngine):
    """Recognizes text with Tesseract, one region per recognized line."""

    def __init__(self, tesseract_cmd: str | None = None) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image: Image.Image, request: RecognitionRequest) -> list[TextRegion]:
        try:
            data = pytesseract.image_to_data(
                image,
                lang="+".join(request.languages),
                config=self._build_config(request),
                output_type=pytesseract.Output.DICT,
            )
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return self._group_lines(data)

    @staticmethod
    def _build_config(request: RecognitionRequest) -> str:
        oem = _LSTM_ONLY if request.accurate else _DEFAULT_ENGINE
        parts = [f"--oem {oem}", f"--psm {_AUTO_PAGE_SEGMENTATION}"]
        parts.append("-c preserve_interword_spaces=1")
        if not request.language_correction:
            # Tesseract's dictionary (dawg) lookups act as its language correction.
            parts.append("-c load_system_dawg=0 -c load_freq_dawg=0")
        return " ".join(parts)

    @staticmethod
    def _group_lines(data: dict[str, Sequence[object]]) -> list[TextRegion]:
        words: dict[_LineKey, list[tuple[str, float]]] = {}
        for i, raw_text in enumerate(data["text"]):
            text = str(raw_text).strip()
            confidence = float(str(data["conf"][i]))
            if not text or confidence < 0:
                continue
            key = (
                int(str(data["page_num"][i])),
                int(str(data["block_num"][i])),
                int(str(data["par_num"][i])),
                int(str(data["line_num"][i])),
            )
            words.setdefault(key, []).append((text, confidence))

        regions: list[TextRegion] = []
        for line in words.values():
            text = " ".join(word for word, _ in line)
            confidence = sum(conf for _, conf in line) / len(line)
            regions.append(TextRegion(text=text, confidence=confidence))
        return regions
