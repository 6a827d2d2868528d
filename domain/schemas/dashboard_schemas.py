"""Schemas for dashboard aggregates"""

from datetime import date
from typing import List

from pydantic import BaseModel


class DateRange(BaseModel):
    start: date
    end: date


class MonthlyGraphResponse(BaseModel):
    """Per-month income/expenses plus cumulative savings, aligned to labels"""

    labels: List[str]
    expenses: List[float]
    income: List[float]
    savings: List[float]
    range: DateRange


class CategoryTotal(BaseModel):
    category: str
    total: float


class MonthSpending(BaseModel):
    total: float


class TypeTotal(BaseModel):
    document_type_id: int
    description: str
    total: float


class YearlySumResponse(BaseModel):
    year: int
    total: float
    by_type: List[TypeTotal]


class CategorySeries(BaseModel):
    label: str
    category_id: int
    data: List[float]


class CategoryTimeseriesResponse(BaseModel):
    labels: List[str]
    datasets: List[CategorySeries]
    range: DateRange


class DashboardOverview(BaseModel):
    current_month_spending: MonthSpending
    current_year: YearlySumResponse
