from __future__ import annotations

import logging
from datetime import date

from app.application.market_data.errors import (
    MarketDataInvalidRequestError,
    MarketDataUpstreamUnavailableError,
    map_upstream_error,
)
from app.domain.options.contracts import is_option_ticker
from app.domain.options.schemas import OptionAggregatesResult
from app.infrastructure.clients.massive import MassiveClient
from app.infrastructure.clients.massive_mapper import map_massive_aggregates_to_points

logger = logging.getLogger(__name__)

SUPPORTED_TIMESPANS = {"second", "minute", "hour", "day", "week", "month", "quarter", "year"}


class OptionsApplicationService:
    def __init__(
        self,
        *,
        massive_client: MassiveClient | None = None,
        default_multiplier: int = 1,
        default_timespan: str = "day",
        default_from: str = "2023-01-09",
        default_to: str = "2023-01-09",
    ) -> None:
        self._massive_client = massive_client
        self._default_multiplier = default_multiplier
        self._default_timespan = default_timespan
        self._default_from = default_from
        self._default_to = default_to

    def get_options_data(
        self,
        *,
        option_ticker: str,
        multiplier: int | None = None,
        timespan: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> OptionAggregatesResult:
        normalized_ticker = option_ticker.strip().upper()
        if not normalized_ticker or not is_option_ticker(normalized_ticker):
            raise MarketDataInvalidRequestError("option_ticker must start with O:")

        effective_multiplier = self._default_multiplier if multiplier is None else multiplier
        if effective_multiplier < 1:
            raise MarketDataInvalidRequestError("multiplier must be at least 1")

        normalized_timespan = (timespan or self._default_timespan).strip().lower()
        if normalized_timespan not in SUPPORTED_TIMESPANS:
            raise MarketDataInvalidRequestError(f"unsupported timespan: {normalized_timespan}")

        start = _parse_iso_date(from_date or self._default_from, field="from")
        end = _parse_iso_date(to_date or self._default_to, field="to")
        if start > end:
            raise MarketDataInvalidRequestError("from must not be later than to")

        if self._massive_client is None:
            raise MarketDataUpstreamUnavailableError("Massive API key is not configured")

        try:
            aggregates = self._massive_client.get_option_aggregates(
                option_ticker=normalized_ticker,
                multiplier=effective_multiplier,
                timespan=normalized_timespan,
                from_date=start.isoformat(),
                to_date=end.isoformat(),
            )
        except Exception as exc:
            logger.warning(
                "Option aggregates request failed",
                extra={"option_ticker": normalized_ticker, "error": str(exc)},
            )
            raise map_upstream_error(
                exc,
                context=f"Failed to fetch option aggregates for {normalized_ticker}",
            ) from exc

        points = map_massive_aggregates_to_points(aggregates)
        return OptionAggregatesResult.from_points(option_ticker=normalized_ticker, points=points)


def _parse_iso_date(value: str, *, field: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise MarketDataInvalidRequestError(f"{field} must be YYYY-MM-DD") from exc
