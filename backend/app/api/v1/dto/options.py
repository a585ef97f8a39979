from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OptionAggregatePointOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    close: float
    high: float
    low: float
    open: float
    time: int
    volume: float
    volume_weighted: float = Field(alias="volumeWeighted")
    transactions: int


class StockDataOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ticker: str
    name: str
    volume: float
    chart_data: list[OptionAggregatePointOut] = Field(alias="chartData")


class OptionChartOut(BaseModel):
    labels: list[str]
    values: list[float]
