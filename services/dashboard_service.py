"""
Dashboard rollups over financial documents.

Every operation accepts an optional `today` so month boundaries can be pinned
in tests; it defaults to the server's local date.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.exceptions import ServiceValidationError
from core.utils.helpers import (
    align_to_labels,
    cumulative,
    first_day_of_month,
    generate_month_labels,
    label_range,
    last_day_of_month,
    to_float,
)
from domain.enums import DocumentKind
from domain.models import retry_transient
from repositories import DashboardRepository

logger = logging.getLogger("scpp.dashboard")

MAX_MONTHS = 120


def _check_months(n_months: int) -> None:
    if n_months < 1 or n_months > MAX_MONTHS:
        raise ServiceValidationError(
            f"n_months must be between 1 and {MAX_MONTHS}",
            details={"n_months": n_months},
        )


class DashboardService:
    @staticmethod
    @retry_transient
    def monthly_graph(
        db: Session, n_months: int = 12, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Income, expenses and cumulative savings for the last n_months.

        Savings are a running balance: the sum of every savings document dated
        before the first month shown, plus each month's savings in turn.

        Returns:
            Dict with labels, expenses, income, savings (all aligned to labels)
            and the covered date range
        """
        _check_months(n_months)
        today = today or date.today()
        repo = DashboardRepository(db)

        labels = generate_month_labels(n_months, today)
        start, end = label_range(labels, today)

        expenses = align_to_labels(
            labels, repo.monthly_totals(DocumentKind.EXPENSE.value, start, end)
        )
        income = align_to_labels(
            labels, repo.monthly_totals(DocumentKind.INCOME.value, start, end)
        )
        monthly_savings = align_to_labels(
            labels, repo.monthly_totals(DocumentKind.SAVINGS.value, start, end)
        )
        opening = to_float(repo.total_before(DocumentKind.SAVINGS.value, start))

        return {
            "labels": labels,
            "expenses": expenses,
            "income": income,
            "savings": cumulative(monthly_savings, opening),
            "range": {"start": start, "end": end},
        }

    @staticmethod
    @retry_transient
    def expenses_by_category(
        db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        """Expense totals per category, largest first"""
        if start_date and end_date and start_date > end_date:
            raise ServiceValidationError("start_date must not be after end_date")
        rows = DashboardRepository(db).totals_by_category(
            DocumentKind.EXPENSE.value, start_date, end_date
        )
        return [{"category": name, "total": to_float(total)} for name, total in rows]

    @staticmethod
    @retry_transient
    def current_month_spending(db: Session, today: Optional[date] = None) -> Dict[str, float]:
        today = today or date.today()
        total = DashboardRepository(db).total_between(
            DocumentKind.EXPENSE.value, first_day_of_month(today), last_day_of_month(today)
        )
        return {"total": to_float(total)}

    @staticmethod
    @retry_transient
    def yearly_sum(
        db: Session, year: Optional[int] = None, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """Sum of all documents in a calendar year, with a per-type breakdown"""
        year = year or (today or date.today()).year
        rows = DashboardRepository(db).totals_by_type(date(year, 1, 1), date(year, 12, 31))
        by_type = [
            {"document_type_id": type_id, "description": description, "total": to_float(total)}
            for type_id, description, total in rows
        ]
        return {
            "year": year,
            "total": round(sum(t["total"] for t in by_type), 2),
            "by_type": by_type,
        }

    @staticmethod
    @retry_transient
    def expenses_by_category_timeseries(
        db: Session, n_months: int = 13, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Monthly expense totals per category for the last n_months.

        Only categories with at least one expense in the window get a
        dataset; datasets are sorted by category name and every data list is
        aligned to labels.
        """
        _check_months(n_months)
        today = today or date.today()
        labels = generate_month_labels(n_months, today)
        start, end = label_range(labels, today)

        rows = DashboardRepository(db).monthly_totals_by_category(
            DocumentKind.EXPENSE.value, start, end
        )

        per_category: Dict[int, Dict[str, Any]] = {}
        for category_id, description, year, month, total in rows:
            entry = per_category.setdefault(
                category_id, {"label": description, "category_id": category_id, "rows": []}
            )
            entry["rows"].append((year, month, total))

        datasets = [
            {
                "label": entry["label"],
                "category_id": entry["category_id"],
                "data": align_to_labels(labels, entry["rows"]),
            }
            for entry in sorted(
                per_category.values(), key=lambda e: (e["label"].lower(), e["category_id"])
            )
        ]
        logger.debug(f"Built timeseries for {len(datasets)} categories over {n_months} months")

        return {"labels": labels, "datasets": datasets, "range": {"start": start, "end": end}}

    @staticmethod
    def overview(db: Session, today: Optional[date] = None) -> Dict[str, Any]:
        today = today or date.today()
        return {
            "current_month_spending": DashboardService.current_month_spending(db, today=today),
            "current_year": DashboardService.yearly_sum(db, today=today),
        }
