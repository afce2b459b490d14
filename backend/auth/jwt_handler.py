from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config

def create_access_token(claims: dict, expires_hours: int | None = None) -> str:
    expire_hours = expires_hours or config.ACCESS_TOKEN_EXPIRES_HOURS
    issued_at = datetime.now(timezone.utc)
    payload = {**claims, "iat": issued_at, "exp": issued_at + timedelta(hours=expire_hours)}
    return jwt.encode(payload, config.ACCESS_TOKEN_SECRET, algorithm=config.ACCESS_TOKEN_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, config.ACCESS_TOKEN_SECRET, algorithms=[config.ACCESS_TOKEN_ALGORITHM])
