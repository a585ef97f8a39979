from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StockSummary:
    ticker: str
    name: str


@dataclass(slots=True)
class ActiveStockDetail:
    ticker: str
    name: str
    market: str
    locale: str
    primary_exchange: str
    type: str
    active: bool
    currency_name: str
    last_updated_utc: str
