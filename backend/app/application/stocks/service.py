from __future__ import annotations

import logging
from typing import Any

from app.application.market_data.errors import (
    MarketDataInvalidRequestError,
    MarketDataUpstreamUnavailableError,
    map_upstream_error,
)
from app.domain.options.contracts import UNDERLYING_PATTERN, is_option_ticker, parse_option_ticker
from app.domain.stocks.schemas import ActiveStockDetail, StockSummary
from app.infrastructure.clients.massive_mapper import (
    map_ticker_results_to_details,
    map_ticker_results_to_summaries,
)
from app.infrastructure.clients.massive_reference import MassiveReferenceClient

logger = logging.getLogger(__name__)


class StocksApplicationService:
    def __init__(
        self,
        *,
        reference_client: MassiveReferenceClient | None = None,
        top_active_limit: int = 5,
    ) -> None:
        self._reference_client = reference_client
        self._top_active_limit = top_active_limit

    def list_active_stocks(self) -> list[StockSummary]:
        client = self._require_client()
        try:
            payload = client.list_tickers(type="CS", active=True)
        except Exception as exc:
            logger.warning("Active stocks request failed", extra={"error": str(exc)})
            raise map_upstream_error(exc, context="Failed to fetch active stocks") from exc

        return map_ticker_results_to_summaries(payload)

    def list_top_active_stocks(self, *, limit: int | None = None) -> list[ActiveStockDetail]:
        effective_limit = self._top_active_limit if limit is None else limit
        if effective_limit < 1 or effective_limit > self._top_active_limit:
            raise MarketDataInvalidRequestError(
                f"limit must be between 1 and {self._top_active_limit}",
            )

        client = self._require_client()
        try:
            payload = client.list_tickers(type=None, active=True)
        except Exception as exc:
            logger.warning("Top active stocks request failed", extra={"error": str(exc)})
            raise map_upstream_error(exc, context="Failed to fetch top active stocks") from exc

        return map_ticker_results_to_details(payload, limit=effective_limit)

    def get_selected_stock_contracts(self, *, ticker: str) -> dict[str, Any]:
        normalized = ticker.strip().upper()
        if is_option_ticker(normalized):
            try:
                parse_option_ticker(normalized)
            except ValueError as exc:
                raise MarketDataInvalidRequestError("ticker has invalid format") from exc
        elif not UNDERLYING_PATTERN.fullmatch(normalized):
            raise MarketDataInvalidRequestError("ticker has invalid format")

        client = self._require_client()
        try:
            return client.list_options_contracts(ticker=normalized)
        except Exception as exc:
            logger.warning("Options contracts request failed", extra={"ticker": normalized, "error": str(exc)})
            raise map_upstream_error(
                exc,
                context=f"Failed to fetch options data for ticker {normalized}",
            ) from exc

    def _require_client(self) -> MassiveReferenceClient:
        if self._reference_client is None:
            raise MarketDataUpstreamUnavailableError("Massive API key is not configured")
        return self._reference_client
