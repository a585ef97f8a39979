from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_current_user, get_options_service, get_stocks_service
from app.api.errors import raise_market_data_error
from app.api.v1.dto.mappers import to_active_stock_detail_out, to_stock_data_out, to_stock_summary_out
from app.api.v1.dto.options import StockDataOut
from app.api.v1.dto.stocks import ActiveStockDetailOut, StockSummaryOut
from app.application.market_data.errors import MarketDataApplicationError
from app.application.options.service import OptionsApplicationService
from app.application.stocks.service import StocksApplicationService
from app.domain.auth.schemas import User

router = APIRouter()


@router.get("/active", response_model=list[StockSummaryOut])
def list_active_stocks(
    service: StocksApplicationService = Depends(get_stocks_service),
) -> list[StockSummaryOut]:
    try:
        stocks = service.list_active_stocks()
    except MarketDataApplicationError as exc:
        raise_market_data_error(exc)
    return [to_stock_summary_out(stock) for stock in stocks]


@router.get("/selected")
def get_selected_stock(
    ticker: str,
    service: StocksApplicationService = Depends(get_stocks_service),
) -> dict[str, Any]:
    try:
        return service.get_selected_stock_contracts(ticker=ticker)
    except MarketDataApplicationError as exc:
        raise_market_data_error(exc, details={"ticker": ticker})


@router.get("/top-active", response_model=list[ActiveStockDetailOut])
def list_top_active_stocks(
    limit: int | None = None,
    service: StocksApplicationService = Depends(get_stocks_service),
    current_user: User = Depends(get_current_user),
) -> list[ActiveStockDetailOut]:
    _ = current_user
    try:
        stocks = service.list_top_active_stocks(limit=limit)
    except MarketDataApplicationError as exc:
        raise_market_data_error(exc)
    return [to_active_stock_detail_out(stock) for stock in stocks]


@router.get("/options-data", response_model=StockDataOut)
def get_options_data(
    option_ticker: str,
    multiplier: int | None = None,
    timespan: str | None = None,
    from_date: str | None = Query(None, alias="from"),
    to_date: str | None = Query(None, alias="to"),
    service: OptionsApplicationService = Depends(get_options_service),
    current_user: User = Depends(get_current_user),
) -> StockDataOut:
    _ = current_user
    try:
        result = service.get_options_data(
            option_ticker=option_ticker,
            multiplier=multiplier,
            timespan=timespan,
            from_date=from_date,
            to_date=to_date,
        )
    except MarketDataApplicationError as exc:
        raise_market_data_error(exc, details={"option_ticker": option_ticker})
    return to_stock_data_out(result)
