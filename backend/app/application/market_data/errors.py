from __future__ import annotations

import httpx


class MarketDataApplicationError(ValueError):
    """Base error for market data application layer."""

    code = "MARKET_DATA_INVALID_REQUEST"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code
        super().__init__(self.message)


class MarketDataInvalidRequestError(MarketDataApplicationError):
    """Raised when request parameters are rejected before any upstream call."""

    code = "MARKET_DATA_INVALID_REQUEST"


class MarketDataNotFoundError(MarketDataApplicationError):
    """Raised when upstream reports the requested resource does not exist."""

    code = "MARKET_DATA_NOT_FOUND"


class MarketDataRateLimitedError(MarketDataApplicationError):
    """Raised when upstream market data provider rate limits request."""

    code = "MARKET_DATA_RATE_LIMITED"


class MarketDataUpstreamUnavailableError(MarketDataApplicationError):
    """Raised when upstream market data provider is unavailable."""

    code = "MARKET_DATA_UPSTREAM_UNAVAILABLE"


def map_upstream_error(exc: Exception, *, context: str) -> MarketDataApplicationError:
    """Wrap a provider failure, keeping the upstream text in the message."""
    detail = _upstream_detail(exc)
    message = f"{context}: {detail}" if detail else context

    status_code = _upstream_status_code(exc)
    lowered = detail.lower()
    if status_code == 404 or "not found" in lowered:
        return MarketDataNotFoundError(message)
    if status_code == 429 or "too many requests" in lowered:
        return MarketDataRateLimitedError(message)
    return MarketDataUpstreamUnavailableError(message)


def _upstream_detail(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("message", "error"):
                value = body.get(key)
                if isinstance(value, str) and value.strip():
                    return f"{response.status_code} {value.strip()}"
        return f"{response.status_code} {response.reason_phrase}".strip()
    return str(exc).strip() or exc.__class__.__name__


def _upstream_status_code(exc: Exception) -> int | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    status = getattr(exc, "status", None) or getattr(exc, "status_code", None)
    if isinstance(status, int):
        return status
    return None
