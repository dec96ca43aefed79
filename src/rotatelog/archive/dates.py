from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

# First three hyphen-separated digit runs, anywhere in the name.
_DATE_RE = re.compile(r"(\d+)-(\d+)-(\d+)")


@dataclass(frozen=True)
class ParsedDate:
    """
    Raw integers captured from a filename, in capture order.

    Names are written month-day-year, so the captures are read as
    (month, day, year). Values are not checked against a calendar.
    """

    first: int
    second: int
    third: int

    @property
    def month(self) -> int:
        return self.first

    @property
    def day(self) -> int:
        return self.second

    @property
    def year(self) -> int:
        return self.third

    @property
    def sort_key(self) -> tuple[int, int, int]:
        # year, then month, then day
        return (self.third, self.first, self.second)


@dataclass(frozen=True)
class Unparseable:
    name: str


DateResult = Union[ParsedDate, Unparseable]


def extract_date(name: str | Path) -> DateResult:
    base = Path(name).name
    m = _DATE_RE.search(base)
    if not m:
        return Unparseable(base)
    return ParsedDate(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def is_parsed(result: DateResult) -> bool:
    return isinstance(result, ParsedDate)


__all__ = ["ParsedDate", "Unparseable", "DateResult", "extract_date", "is_parsed"]
