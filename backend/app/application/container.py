from __future__ import annotations

from functools import lru_cache

from app.application.auth.service import AuthApplicationService
from app.application.dashboard.service import DashboardApplicationService
from app.application.dashboard.view_state import OptionContractTemplate
from app.application.options.service import OptionsApplicationService
from app.application.stocks.service import StocksApplicationService
from app.core.config import settings
from app.infrastructure.clients.massive import MassiveClient
from app.infrastructure.clients.massive_reference import MassiveReferenceClient


@lru_cache
def _massive_client() -> MassiveClient | None:
    if not settings.massive_api_key:
        return None
    return MassiveClient(settings.massive_api_key)


@lru_cache
def _massive_reference_client() -> MassiveReferenceClient | None:
    if not settings.massive_api_key:
        return None
    return MassiveReferenceClient(
        settings.massive_api_key,
        base_url=settings.massive_base_url,
        timeout=settings.massive_timeout_seconds,
    )


def close_clients() -> None:
    if _massive_reference_client.cache_info().currsize:
        reference_client = _massive_reference_client()
        if reference_client is not None:
            reference_client.close()
    _massive_reference_client.cache_clear()
    _massive_client.cache_clear()


def build_stocks_service() -> StocksApplicationService:
    return StocksApplicationService(
        reference_client=_massive_reference_client(),
        top_active_limit=settings.top_active_stocks_limit,
    )


def build_options_service() -> OptionsApplicationService:
    return OptionsApplicationService(
        massive_client=_massive_client(),
        default_multiplier=settings.options_default_multiplier,
        default_timespan=settings.options_default_timespan,
        default_from=settings.options_default_from,
        default_to=settings.options_default_to,
    )


def build_dashboard_service() -> DashboardApplicationService:
    return DashboardApplicationService(
        stocks_service=build_stocks_service(),
        options_service=build_options_service(),
        template=OptionContractTemplate(
            expiration=settings.dashboard_option_expiration,
            option_type=settings.dashboard_option_type,
            strike=settings.dashboard_option_strike,
        ),
    )


def build_auth_service() -> AuthApplicationService:
    return AuthApplicationService(secret_key=settings.app_secret_key)
