from __future__ import annotations

from typing import Any, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.deps import (
    get_current_user,
    get_dashboard_service,
    get_options_service,
    get_stocks_service,
)
from app.api.errors import install_api_error_handlers
from app.api.v1.router import api_router
from app.application.dashboard.service import DashboardApplicationService
from app.application.market_data.errors import MarketDataApplicationError
from app.domain.auth.schemas import User
from app.domain.options.schemas import OptionAggregatePoint, OptionAggregatesResult
from app.domain.stocks.schemas import ActiveStockDetail, StockSummary


class FakeStocksService:
    def __init__(self) -> None:
        self.active_error: MarketDataApplicationError | None = None
        self.selected_calls: list[str] = []
        self.top_active_calls: list[int | None] = []

    def list_active_stocks(self) -> list[StockSummary]:
        if self.active_error is not None:
            raise self.active_error
        return [
            StockSummary(ticker="AAPL", name="Apple Inc."),
            StockSummary(ticker="MSFT", name="Microsoft Corp"),
        ]

    def list_top_active_stocks(self, *, limit: int | None = None) -> list[ActiveStockDetail]:
        self.top_active_calls.append(limit)
        return [
            ActiveStockDetail(
                ticker="AAPL",
                name="Apple Inc.",
                market="stocks",
                locale="us",
                primary_exchange="XNAS",
                type="CS",
                active=True,
                currency_name="usd",
                last_updated_utc="2026-02-10T00:00:00Z",
            )
        ]

    def get_selected_stock_contracts(self, *, ticker: str) -> dict[str, Any]:
        self.selected_calls.append(ticker)
        return {
            "status": "OK",
            "results": [{"ticker": "O:AAPL251219C00650000", "underlying_ticker": "AAPL"}],
        }


class FakeOptionsService:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.error: MarketDataApplicationError | None = None

    def get_options_data(
        self,
        *,
        option_ticker: str,
        multiplier: int | None = None,
        timespan: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> OptionAggregatesResult:
        self.calls.append(
            {
                "option_ticker": option_ticker,
                "multiplier": multiplier,
                "timespan": timespan,
                "from_date": from_date,
                "to_date": to_date,
            }
        )
        if self.error is not None:
            raise self.error
        return OptionAggregatesResult.from_points(
            option_ticker=option_ticker,
            points=[
                OptionAggregatePoint(
                    close=11,
                    high=12,
                    low=9,
                    open=10,
                    time=169000000,
                    volume=500,
                    volume_weighted=10.5,
                    transactions=20,
                )
            ],
        )


def fake_user() -> User:
    return User(id="user-1", email="trader@example.com")


@pytest.fixture
def stocks_service() -> FakeStocksService:
    return FakeStocksService()


@pytest.fixture
def options_service() -> FakeOptionsService:
    return FakeOptionsService()


@pytest.fixture
def api_app(
    stocks_service: FakeStocksService,
    options_service: FakeOptionsService,
) -> FastAPI:
    app = FastAPI()
    install_api_error_handlers(app)
    app.include_router(api_router, prefix="/api/v1")
    app.dependency_overrides[get_current_user] = fake_user
    app.dependency_overrides[get_stocks_service] = lambda: stocks_service
    app.dependency_overrides[get_options_service] = lambda: options_service
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardApplicationService(
        stocks_service=stocks_service,  # type: ignore[arg-type]
        options_service=options_service,  # type: ignore[arg-type]
    )
    return app


@pytest.fixture
def api_client(api_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(api_app) as client:
        yield client
