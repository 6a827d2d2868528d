"""
SCPP utility functions
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple


# Calendar month utilities

def shift_months(day: date, months: int) -> date:
    """Move to the first day of the month `months` away from `day`'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def month_label(year: int, month: int) -> str:
    """Format a month as YYYY-MM."""
    return f"{int(year):04d}-{int(month):02d}"


def generate_month_labels(n_months: int, today: date) -> List[str]:
    """
    Return the last `n_months` month labels, oldest first, ending with the
    month containing `today`.

    >>> generate_month_labels(3, date(2024, 2, 10))
    ['2023-12', '2024-01', '2024-02']
    """
    if n_months < 1:
        raise ValueError("n_months must be at least 1")
    start = shift_months(today, -(n_months - 1))
    labels = []
    for offset in range(n_months):
        d = shift_months(start, offset)
        labels.append(month_label(d.year, d.month))
    return labels


def label_range(labels: List[str], today: date) -> Tuple[date, date]:
    """Date span covered by month labels: first day of the first label to end of today's month."""
    year, month = (int(part) for part in labels[0].split("-"))
    return date(year, month, 1), last_day_of_month(today)


def align_to_labels(
    labels: Iterable[str], rows: Iterable[Tuple[Any, Any, Any]]
) -> List[float]:
    """
    Spread (year, month, total) rows over the label list; months without a
    row get 0.
    """
    totals: Dict[str, float] = {}
    for year, month, total in rows:
        label = month_label(year, month)
        totals[label] = totals.get(label, 0.0) + to_float(total)
    return [totals.get(label, 0.0) for label in labels]


def cumulative(values: Iterable[float], start: float = 0.0) -> List[float]:
    """Running sum of `values` seeded with `start`."""
    out = []
    running = start
    for v in values:
        running += v
        out.append(round(running, 2))
    return out


# Numeric utilities

def to_float(value: Optional[Any]) -> float:
    """Coerce Decimal/None aggregates to float for JSON responses."""
    if value is None:
        return 0.0
    return float(value)
