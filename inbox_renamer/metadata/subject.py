"""Subject line heuristics.

Strategies are tried in order; the first one that recognizes a subject line
decides, even when that line sanitizes to nothing.
"""

import re
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

SUBJECT_MARKERS = ("betreff", "betr.", "subject")
ADDRESS_INDICATORS = ("straße", "str.", "strasse", "plz")
HEADER_SCAN_LINES = 15
HEADER_MIN_LENGTH = 5
HEADER_MAX_LENGTH = 80


@dataclass(frozen=True)
class SubjectMatch:
    """A line picked by a strategy and the subject sanitized from it."""

    line: str
    value: str | None


class SubjectStrategy(Protocol):
    def attempt(self, lines: Sequence[str]) -> SubjectMatch | None: ...


def _is_edge_noise(char: str) -> bool:
    return char.isspace() or unicodedata.category(char).startswith("P")


def sanitize_subject(value: str) -> str | None:
    """Trim whitespace/punctuation at both ends and collapse inner whitespace."""
    start, end = 0, len(value)
    while start < end and _is_edge_noise(value[start]):
        start += 1
    while end > start and _is_edge_noise(value[end - 1]):
        end -= 1
    collapsed = " ".join(value[start:end].split())
    return collapsed or None


class MarkerSubjectStrategy:
    """Finds the first line containing a subject marker such as ``Betreff:``."""

    def __init__(self, markers: Sequence[str] = SUBJECT_MARKERS) -> None:
        self._markers = tuple(markers)

    def attempt(self, lines: Sequence[str]) -> SubjectMatch | None:
        for line in lines:
            lowered = line.lower()
            marker = next((m for m in self._markers if m in lowered), None)
            if marker is None:
                continue
            cleaned = re.sub(re.escape(marker), "", line, flags=re.IGNORECASE)
            return SubjectMatch(line=line, value=sanitize_subject(cleaned))
        return None


class HeaderLineSubjectStrategy:
    """Takes the first plausible header line near the top of the document."""

    def __init__(
        self,
        scan_lines: int = HEADER_SCAN_LINES,
        min_length: int = HEADER_MIN_LENGTH,
        max_length: int = HEADER_MAX_LENGTH,
    ) -> None:
        self._scan_lines = scan_lines
        self._min_length = min_length
        self._max_length = max_length

    def attempt(self, lines: Sequence[str]) -> SubjectMatch | None:
        for line in lines[: self._scan_lines]:
            trimmed = line.strip()
            if not self._min_length <= len(trimmed) <= self._max_length:
                continue
            if self._looks_like_address(trimmed):
                continue
            sanitized = sanitize_subject(trimmed)
            if sanitized is not None:
                return SubjectMatch(line=line, value=sanitized)
        return None

    @staticmethod
    def _looks_like_address(value: str) -> bool:
        lowered = value.lower()
        return any(indicator in lowered for indicator in ADDRESS_INDICATORS)


class SubjectDetector:
    def __init__(self, strategies: Sequence[SubjectStrategy] | None = None) -> None:
        self._strategies: tuple[SubjectStrategy, ...] = tuple(
            strategies
            if strategies is not None
            else (MarkerSubjectStrategy(), HeaderLineSubjectStrategy())
        )

    def find_subject(self, lines: Sequence[str]) -> str | None:
        for strategy in self._strategies:
            match = strategy.attempt(lines)
            if match is not None:
                return match.value
        return None
