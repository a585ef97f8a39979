from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.application.market_data.errors import (
    MarketDataApplicationError,
    MarketDataInvalidRequestError,
    MarketDataNotFoundError,
    MarketDataRateLimitedError,
    MarketDataUpstreamUnavailableError,
)

_MARKET_DATA_STATUS_CODES: dict[type[MarketDataApplicationError], int] = {
    MarketDataInvalidRequestError: 400,
    MarketDataNotFoundError: 404,
    MarketDataRateLimitedError: 429,
    MarketDataUpstreamUnavailableError: 502,
}


@dataclass(slots=True)
class ApiError(Exception):
    status_code: int
    code: str
    message: str
    details: dict | None = None


def raise_api_error(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict | None = None,
) -> NoReturn:
    raise ApiError(status_code=status_code, code=code, message=message, details=details)


def raise_market_data_error(exc: MarketDataApplicationError, *, details: dict | None = None) -> NoReturn:
    raise_api_error(
        status_code=_MARKET_DATA_STATUS_CODES.get(type(exc), 400),
        code=exc.code,
        message=exc.message,
        details=details,
    )


def install_api_error_handlers(application: FastAPI) -> None:
    @application.exception_handler(ApiError)
    async def _handle_api_error(_, exc: ApiError) -> JSONResponse:  # type: ignore[override]
        error_payload: dict = {
            "code": exc.code,
            "message": exc.message,
        }
        if exc.details is not None:
            error_payload["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content={"error": error_payload})
