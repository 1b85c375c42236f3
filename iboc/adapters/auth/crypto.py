from datetime import timedelta
from typing import Any

from iboc.api.auth_utils import (
    DEV_SECRET_KEY,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from iboc.domain.entities import AppUser


class JWTAuthAdapter:
    """Auth adapter that uses JWT tokens and passlib (argon2) for password hashing."""

    def __init__(self, secret_key: str = DEV_SECRET_KEY):
        self.secret_key = secret_key

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)

    def create_token(self, user: AppUser, ttl_minutes: int) -> str:
        claims: dict[str, Any] = {"sub": user.uid, **user.model_dump(exclude={"uid"})}
        return create_access_token(claims, self.secret_key, timedelta(minutes=ttl_minutes))

    def validate_token(self, token: str) -> AppUser | None:
        payload = decode_access_token(token, self.secret_key)
        if not payload or not isinstance(payload.get("sub"), str):
            return None
        try:
            return AppUser(
                uid=payload["sub"],
                email=payload.get("email") or "",
                type=payload["type"],
                display_name=payload.get("display_name"),
                permissions=payload.get("permissions") or "viewer",
            )
        except (KeyError, ValueError):
            return None
