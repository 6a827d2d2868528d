"""Dashboard aggregate routes"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_today, require_session
from api.responses import AUTH_ERROR_RESPONSES
from domain.models import get_db_session
from domain.schemas.dashboard_schemas import (
    CategoryTimeseriesResponse,
    CategoryTotal,
    DashboardOverview,
    MonthlyGraphResponse,
    MonthSpending,
    YearlySumResponse,
)
from services.dashboard_service import DashboardService, MAX_MONTHS

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(require_session)],
    responses=AUTH_ERROR_RESPONSES,
)
logger = logging.getLogger("scpp.api.dashboard")


@router.get("", response_model=DashboardOverview)
def get_overview(
    db: Session = Depends(get_db_session), today: date = Depends(get_today)
):
    """Current month spending and this year's totals by document type"""
    return DashboardService.overview(db, today=today)


@router.get("/monthly-graph", response_model=MonthlyGraphResponse)
def monthly_graph(
    n_months: int = Query(12, ge=1, le=MAX_MONTHS),
    db: Session = Depends(get_db_session),
    today: date = Depends(get_today),
):
    """
    Monthly expenses and income plus the cumulative savings balance for the
    last n_months, ending with the current month.
    """
    return DashboardService.monthly_graph(db, n_months=n_months, today=today)


@router.get("/expenses-by-category", response_model=List[CategoryTotal])
def expenses_by_category(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db_session),
):
    return DashboardService.expenses_by_category(db, start_date, end_date)


@router.get("/current-month-spending", response_model=MonthSpending)
def current_month_spending(
    db: Session = Depends(get_db_session), today: date = Depends(get_today)
):
    return DashboardService.current_month_spending(db, today=today)


@router.get("/yearly-sum", response_model=YearlySumResponse)
def yearly_sum(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    db: Session = Depends(get_db_session),
    today: date = Depends(get_today),
):
    """Total of all documents in a year (default: the current one), by type"""
    return DashboardService.yearly_sum(db, year=year, today=today)


@router.get(
    "/expenses-by-category-timeseries", response_model=CategoryTimeseriesResponse
)
def expenses_by_category_timeseries(
    n_months: int = Query(13, ge=1, le=MAX_MONTHS),
    db: Session = Depends(get_db_session),
    today: date = Depends(get_today),
):
    return DashboardService.expenses_by_category_timeseries(
        db, n_months=n_months, today=today
    )
