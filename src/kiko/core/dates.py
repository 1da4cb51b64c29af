# src/kiko/core/dates.py

"""
Datetime parsing for command arguments and persisted records.

User input is matched against a fixed, ordered list of formats; the first one
that yields a valid datetime wins. dd/MM/yyyy is tried before MM/dd/yyyy, so
"03/04/2024 0900" always means 3 April.

Failures are returned as DateParseError values rather than raised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final

CANONICAL_FORMAT: Final[str] = "%Y-%m-%d %H%M"


@dataclass(frozen=True, slots=True)
class DateFormat:
    label: str
    example: str
    pattern: re.Pattern[str]
    strptime_format: str


def _fmt(label: str, example: str, guard: str, strptime_format: str) -> DateFormat:
    # The guard enforces digit widths; strptime alone would read "959" as 09:59.
    return DateFormat(label, example, re.compile(guard, re.ASCII), strptime_format)


INPUT_FORMATS: Final[tuple[DateFormat, ...]] = (
    _fmt("yyyy-MM-dd HHmm", "2019-12-02 1800", r"\d{4}-\d{2}-\d{2} \d{4}", "%Y-%m-%d %H%M"),
    _fmt("dd/MM/yyyy HHmm", "02/12/2019 1800", r"\d{2}/\d{2}/\d{4} \d{4}", "%d/%m/%Y %H%M"),
    _fmt("MM/dd/yyyy HHmm", "12/02/2019 1800", r"\d{2}/\d{2}/\d{4} \d{4}", "%m/%d/%Y %H%M"),
    _fmt("yyyy/MM/dd HHmm", "2019/12/02 1800", r"\d{4}/\d{2}/\d{2} \d{4}", "%Y/%m/%d %H%M"),
    _fmt("yyyy-MM-dd", "2019-12-02", r"\d{4}-\d{2}-\d{2}", "%Y-%m-%d"),
)

_CANONICAL: Final[DateFormat] = INPUT_FORMATS[0]


@dataclass(frozen=True, slots=True)
class DateParseError:
    """No accepted format matched `token`."""

    token: str
    formats: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Unable to parse date {self.token!r} (accepted: {', '.join(self.formats)})"


def _try_format(token: str, fmt: DateFormat) -> datetime | None:
    if not fmt.pattern.fullmatch(token):
        return None
    try:
        return datetime.strptime(token, fmt.strptime_format)
    except ValueError:
        # Right shape, impossible value (month 13, Feb 30, hour 25, ...).
        return None


def parse_datetime(token: str) -> datetime | DateParseError:
    """Parse user input, trying INPUT_FORMATS in order. Date-only input means 00:00."""
    text = token.strip()
    for fmt in INPUT_FORMATS:
        parsed = _try_format(text, fmt)
        if parsed is not None:
            return parsed
    return DateParseError(token=token, formats=tuple(f.label for f in INPUT_FORMATS))


def parse_canonical(token: str) -> datetime | DateParseError:
    """Parse the storage format only (yyyy-MM-dd HHmm)."""
    parsed = _try_format(token.strip(), _CANONICAL)
    if parsed is None:
        return DateParseError(token=token, formats=(_CANONICAL.label,))
    return parsed


def format_canonical(value: datetime) -> str:
    return value.strftime(CANONICAL_FORMAT)


def format_display(value: datetime) -> str:
    """Human form used in task descriptions, e.g. 'Dec 31 2024, 11:59 PM'."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%b %d %Y}, {hour}:{value:%M} {meridiem}"
