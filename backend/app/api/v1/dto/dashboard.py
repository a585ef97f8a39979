from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.api.v1.dto.options import OptionChartOut, StockDataOut
from app.api.v1.dto.stocks import StockSummaryOut

T = TypeVar("T")


class LoadStateOut(BaseModel, Generic[T]):
    status: str
    data: T | None = None
    error_message: str | None = None


class DashboardOut(BaseModel):
    selected_ticker: str
    option_ticker: str | None = None
    is_loading: bool
    stocks: LoadStateOut[list[StockSummaryOut]]
    option_data: LoadStateOut[StockDataOut]
    chart: OptionChartOut | None = None
    errors: list[str] = Field(default_factory=list)
