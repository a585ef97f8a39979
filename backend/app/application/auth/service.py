from __future__ import annotations

from app.core.config import settings
from app.core.security import decode_access_token
from app.domain.auth.constants import ERROR_INVALID_TOKEN, ERROR_TOKEN_EXPIRED
from app.domain.auth.schemas import User


class AuthApplicationService:
    """Verifies bearer tokens issued by the identity provider sharing ``APP_SECRET_KEY``."""

    def __init__(self, *, secret_key: str | None = None) -> None:
        self._secret_key = secret_key or settings.app_secret_key

    def get_current_user_from_token(self, *, token: str) -> User:
        try:
            payload = decode_access_token(token=token.strip(), secret_key=self._secret_key)
        except ValueError as exc:
            if str(exc) == "Token expired":
                raise ValueError(ERROR_TOKEN_EXPIRED) from exc
            raise ValueError(ERROR_INVALID_TOKEN) from exc

        email = payload.get("email")
        return User(
            id=str(payload["sub"]).strip(),
            email=email if isinstance(email, str) and email.strip() else None,
        )
