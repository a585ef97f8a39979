from __future__ import annotations

import base64
import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from typing import Any

JWT_ALGORITHM = "HS256"


def create_access_token(
    *,
    subject: str,
    secret_key: str,
    expires_delta: timedelta,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    now = datetime.now(tz=timezone.utc)
    payload: dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    if additional_claims:
        payload.update(additional_claims)

    header = {"alg": JWT_ALGORITHM, "typ": "JWT"}
    encoded_header = _json_b64url_encode(header)
    encoded_payload = _json_b64url_encode(payload)
    signing_input = f"{encoded_header}.{encoded_payload}".encode("ascii")
    signature = hmac.new(secret_key.encode("utf-8"), signing_input, hashlib.sha256).digest()
    encoded_signature = _b64url_encode(signature)

    return f"{encoded_header}.{encoded_payload}.{encoded_signature}"


def decode_access_token(*, token: str, secret_key: str) -> dict[str, Any]:
    try:
        encoded_header, encoded_payload, encoded_signature = token.split(".", maxsplit=2)
    except ValueError as exc:
        raise ValueError("Invalid token") from exc

    signing_input = f"{encoded_header}.{encoded_payload}".encode("ascii", errors="replace")
    expected_signature = hmac.new(secret_key.encode("utf-8"), signing_input, hashlib.sha256).digest()
    try:
        actual_signature = _b64url_decode(encoded_signature)
    except ValueError as exc:
        raise ValueError("Invalid token") from exc
    if not hmac.compare_digest(actual_signature, expected_signature):
        raise ValueError("Invalid token")

    header = _json_b64url_decode(encoded_header)
    if header.get("alg") != JWT_ALGORITHM:
        raise ValueError("Invalid token")

    payload = _json_b64url_decode(encoded_payload)
    exp = payload.get("exp")
    if not isinstance(exp, int):
        raise ValueError("Invalid token")

    now_ts = int(datetime.now(tz=timezone.utc).timestamp())
    if exp <= now_ts:
        raise ValueError("Token expired")

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise ValueError("Invalid token")

    return payload


def _b64url_encode(value: bytes) -> str:
    return base64.urlsafe_b64encode(value).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(f"{value}{padding}".encode("ascii"))


def _json_b64url_encode(payload: dict[str, Any]) -> str:
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return _b64url_encode(raw)


def _json_b64url_decode(payload: str) -> dict[str, Any]:
    try:
        raw = _b64url_decode(payload)
        data = json.loads(raw.decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValueError("Invalid token") from exc
    if not isinstance(data, dict):
        raise ValueError("Invalid token")
    return data
