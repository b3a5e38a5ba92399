"""Date heuristics over a document's raw text.

The first strategy whose pattern matches anywhere in the text decides the
date. A date-shaped match that is not a real calendar day (``31.04.2023``)
yields no date; later strategies are not consulted in that case.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

_DAY = r"(0?[1-9]|[12][0-9]|3[01])"
_MONTH = r"(0?[1-9]|1[0-2])"
_YEAR = r"(19|20)\d\d"

GERMAN_MONTHS = {
    "januar": 1,
    "februar": 2,
    "märz": 3,
    "april": 4,
    "mai": 5,
    "juni": 6,
    "juli": 7,
    "august": 8,
    "september": 9,
    "oktober": 10,
    "november": 11,
    "dezember": 12,
}


@dataclass(frozen=True)
class DateMatch:
    """Substring matched by a strategy and the date parsed from it, if valid."""

    text: str
    value: date | None


class DateStrategy(Protocol):
    def attempt(self, text: str) -> DateMatch | None: ...


class _FormatDateStrategy:
    """Regex match followed by a ``strptime`` parse with a fixed format."""

    pattern: re.Pattern[str]
    date_format: str

    def attempt(self, text: str) -> DateMatch | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        matched = match.group(0)
        try:
            value = datetime.strptime(matched, self.date_format).date()
        except ValueError:
            value = None
        return DateMatch(text=matched, value=value)


class NumericDayFirstStrategy(_FormatDateStrategy):
    """``05.03.2023`` style dates."""

    pattern = re.compile(rf"\b{_DAY}[.]{_MONTH}[.]{_YEAR}\b")
    date_format = "%d.%m.%Y"


class IsoDateStrategy(_FormatDateStrategy):
    """``2023-03-05`` style dates."""

    pattern = re.compile(rf"\b{_YEAR}-{_MONTH}-{_DAY}\b")
    date_format = "%Y-%m-%d"


class LongFormDateStrategy:
    """``5 März 2023`` style dates with German month names."""

    pattern = re.compile(
        rf"\b{_DAY}\s+({'|'.join(GERMAN_MONTHS)})\s+{_YEAR}\b",
        re.IGNORECASE,
    )

    def attempt(self, text: str) -> DateMatch | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        day, month_name, year = match.group(0).split()
        try:
            value = date(int(year), GERMAN_MONTHS[month_name.lower()], int(day))
        except (KeyError, ValueError):
            value = None
        return DateMatch(text=match.group(0), value=value)


class DateDetector:
    def __init__(self, strategies: Sequence[DateStrategy] | None = None) -> None:
        self._strategies: tuple[DateStrategy, ...] = tuple(
            strategies
            if strategies is not None
            else (NumericDayFirstStrategy(), IsoDateStrategy(), LongFormDateStrategy())
        )

    def find_date(self, text: str) -> DateMatch | None:
        """Return the match of the highest-priority strategy, or None if none match."""
        for strategy in self._strategies:
            match = strategy.attempt(text)
            if match is not None:
                return match
        return None
