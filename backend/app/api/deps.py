from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.auth.service import AuthApplicationService
from app.application.container import (
    build_auth_service,
    build_dashboard_service,
    build_options_service,
    build_stocks_service,
)
from app.application.dashboard.service import DashboardApplicationService
from app.application.options.service import OptionsApplicationService
from app.application.stocks.service import StocksApplicationService
from app.domain.auth.schemas import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_stocks_service() -> StocksApplicationService:
    return build_stocks_service()


def get_options_service() -> OptionsApplicationService:
    return build_options_service()


def get_dashboard_service() -> DashboardApplicationService:
    return build_dashboard_service()


def get_auth_service() -> AuthApplicationService:
    return build_auth_service()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    service: AuthApplicationService = Depends(get_auth_service),
) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized_error()

    try:
        return service.get_current_user_from_token(token=credentials.credentials)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def _unauthorized_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication credentials were not provided",
        headers={"WWW-Authenticate": "Bearer"},
    )
