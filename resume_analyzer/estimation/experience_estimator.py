"""Offline heuristic for total years of professional experience.

Scans resume text for employment date ranges in two shapes:

1. ``<Month> <Year> - <Month|Present> [<Year>]``  e.g. "Mar 2019 - Present"
2. ``<Year> - <Year|Present>``                     e.g. "2016 - 2020"

The result is the span from the earliest start to the latest end across all
ranges, so concurrent or overlapping roles are never counted twice. This is
a rough bound, not an exact figure: a career with long gaps inside the
envelope is overcounted, and histories written in other date formats are
undercounted (down to 0.0 when nothing matches).
"""

import re
from datetime import date

_MONTH_NAMES = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
_YEAR = r"(?:19|20)\d{2}"
_SEPARATOR = r"\s*(?:-|\u2013|\u2014|\bto\b)\s*"
_PRESENT = r"present|current|now"

_MONTH_RANGE_RE = re.compile(
    rf"\b(?P<start_month>{_MONTH_NAMES})\.?,?\s+(?P<start_year>{_YEAR})"
    rf"{_SEPARATOR}"
    rf"(?:(?P<present>{_PRESENT})\b"
    rf"|(?P<end_month>{_MONTH_NAMES})\b\.?(?:,?\s+(?P<end_year>{_YEAR}))?)",
    re.IGNORECASE,
)
_YEAR_RANGE_RE = re.compile(
    rf"\b(?P<start_year>{_YEAR}){_SEPARATOR}"
    rf"(?:(?P<present>{_PRESENT})|(?P<end_year>{_YEAR}))\b",
    re.IGNORECASE,
)

_MONTH_NUMBERS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}


def estimate_experience_years(text: str, today: date | None = None) -> float:
    """Estimate total years of experience from date ranges in *text*.

    Args:
        text: Normalized resume text.
        today: Date used for "Present"/"Current" ends. Defaults to date.today().

    Returns:
        Whole-month span between the earliest start and latest end, in years
        rounded to one decimal. 0.0 when no valid range is found.
    """
    if not text:
        return 0.0
    today = today or date.today()
    current = date(today.year, today.month, 1)

    ranges = list(_month_ranges(text, current))
    # Month ranges are blanked out so "Mar 2019 - Present" is not re-read as
    # the year range "2019 - Present" starting in January.
    remaining = _MONTH_RANGE_RE.sub(" ", text)
    ranges.extend(_year_ranges(remaining, current))

    valid = [(start, end) for start, end in ranges if end >= start]
    if not valid:
        return 0.0

    earliest = min(start for start, _ in valid)
    latest = max(end for _, end in valid)
    months = (latest.year - earliest.year) * 12 + (latest.month - earliest.month)
    return round(months / 12, 1)


def _month_ranges(text: str, current: date) -> list[tuple[date, date]]:
    ranges: list[tuple[date, date]] = []
    for match in _MONTH_RANGE_RE.finditer(text):
        start_year = int(match.group("start_year"))
        start = date(start_year, _month_number(match.group("start_month")), 1)
        if match.group("present"):
            end = current
        else:
            end_year = int(match.group("end_year") or start_year)
            end = date(end_year, _month_number(match.group("end_month")), 1)
        ranges.append((start, end))
    return ranges


def _year_ranges(text: str, current: date) -> list[tuple[date, date]]:
    ranges: list[tuple[date, date]] = []
    for match in _YEAR_RANGE_RE.finditer(text):
        start = date(int(match.group("start_year")), 1, 1)
        if match.group("present"):
            end = current
        else:
            end = date(int(match.group("end_year")), 1, 1)
        ranges.append((start, end))
    return ranges


def _month_number(name: str) -> int:
    return _MONTH_NUMBERS[name[:3].lower()]
