"""Monthly and year-on-year variations of the index series."""

from __future__ import annotations

import calendar
import math
from dataclasses import replace
from datetime import date
from typing import Iterable

from iccindex.records import Classifier, Row, row_sort_key

_MONTH = 1
_YEAR = 12


def _months_before(day: date, months: int) -> date:
    total = day.year * 12 + (day.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _truncate(value: float) -> float:
    return math.floor(value * 100) / 100


def percent_change(current: float, previous: float) -> float:
    """Percentage change from a previous value to a current one."""
    return (current / previous - 1) * 100


def compute_variations(rows: Iterable[Row]) -> list[Row]:
    """Return the rows sorted, with monthly and year-on-year variations set.

    A variation is the percentage change against the row of the same
    classifier and level one month (or twelve months) earlier, rounded
    down to two decimals. It stays None when that earlier row is missing.
    """
    ordered = sorted(rows, key=row_sort_key)
    by_key: dict[tuple[date, Classifier, str], Row] = {}
    for row in ordered:
        by_key.setdefault((row.period, row.classifier, row.level), row)

    def variation(row: Row, months: int) -> float | None:
        key = (_months_before(row.period, months), row.classifier, row.level)
        previous = by_key.get(key)
        if previous is None:
            return None
        return _truncate(percent_change(row.index, previous.index))

    return [
        replace(row, monthly=variation(row, _MONTH), yearly=variation(row, _YEAR))
        for row in ordered
    ]