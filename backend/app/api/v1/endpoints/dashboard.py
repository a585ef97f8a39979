from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from app.api.deps import get_auth_service, get_current_user, get_dashboard_service
from app.api.v1.dto.dashboard import DashboardOut
from app.api.v1.dto.mappers import to_dashboard_out
from app.application.auth.service import AuthApplicationService
from app.application.dashboard.service import DashboardApplicationService
from app.application.dashboard.view_state import DashboardViewState
from app.domain.auth.schemas import User

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass(slots=True, frozen=True)
class DashboardClientAction:
    action: str
    ticker: str


@router.get("", response_model=DashboardOut)
async def get_dashboard(
    ticker: str = "",
    service: DashboardApplicationService = Depends(get_dashboard_service),
    current_user: User = Depends(get_current_user),
) -> DashboardOut:
    _ = current_user
    state = await service.load(ticker=ticker)
    return to_dashboard_out(state)


@router.websocket("/ws")
async def dashboard_stream(
    websocket: WebSocket,
    service: DashboardApplicationService = Depends(get_dashboard_service),
    auth_service: AuthApplicationService = Depends(get_auth_service),
) -> None:
    token = _extract_ws_token(websocket)
    await websocket.accept()
    if not token:
        await websocket.close(code=4401, reason="missing token")
        return

    try:
        current_user = auth_service.get_current_user_from_token(token=token)
    except ValueError:
        await websocket.close(code=4401, reason="invalid token")
        return

    send_lock = asyncio.Lock()

    async def push_state(state: DashboardViewState) -> None:
        await _send_ws_json(websocket, payload=_dashboard_state(state), send_lock=send_lock)

    session = service.new_session(on_change=push_state)
    logger.debug("Dashboard session opened", extra={"user_id": current_user.id})
    try:
        await session.start()
        initial_ticker = websocket.query_params.get("ticker", "").strip()
        if initial_ticker:
            await session.select(initial_ticker)

        while True:
            raw = await websocket.receive_text()
            parsed = parse_dashboard_action(raw)
            if parsed is None:
                await _send_ws_json(
                    websocket,
                    payload=_system_error(
                        code="DASHBOARD_INVALID_ACTION",
                        message="invalid websocket payload",
                    ),
                    send_lock=send_lock,
                )
                continue
            await session.select(parsed.ticker)
    except WebSocketDisconnect:
        return
    finally:
        await session.close()
        logger.debug("Dashboard session closed", extra={"user_id": current_user.id})


def parse_dashboard_action(raw: str) -> DashboardClientAction | None:
    try:
        payload = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None

    action = payload.get("action")
    ticker = payload.get("ticker", "")
    if action != "select" or not isinstance(ticker, str):
        return None
    return DashboardClientAction(action=action, ticker=ticker.strip().upper())


def _extract_ws_token(websocket: WebSocket) -> str | None:
    query_token = websocket.query_params.get("token")
    if query_token:
        return query_token.strip()

    authorization = websocket.headers.get("authorization")
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", maxsplit=1)[1].strip()
    return None


def _dashboard_state(state: DashboardViewState) -> dict[str, object]:
    return {
        "type": "dashboard.state",
        "ts": _utc_now_iso(),
        "data": to_dashboard_out(state).model_dump(mode="json", by_alias=True),
    }


def _system_error(*, code: str, message: str) -> dict[str, object]:
    return {
        "type": "system.error",
        "ts": _utc_now_iso(),
        "data": {
            "code": code,
            "message": message,
        },
    }


async def _send_ws_json(
    websocket: WebSocket,
    *,
    payload: dict[str, Any],
    send_lock: asyncio.Lock,
) -> None:
    async with send_lock:
        await websocket.send_json(payload)


def _utc_now_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat().replace("+00:00", "Z")
