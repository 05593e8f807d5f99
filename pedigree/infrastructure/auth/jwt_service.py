from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from pedigree.application.errors import CredentialExpired, InvalidCredential
from pedigree.domain.value_objects.role import Role


class JWTService:
    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expires_minutes: int = 60,
        issuer: str | None = None,
        audience: str | None = None,
        leeway_seconds: int = 0,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expires_minutes = access_token_expires_minutes
        self.issuer = issuer
        self.audience = audience
        self.leeway_seconds = leeway_seconds

    def create_access_token(
        self,
        *,
        subject: UUID,
        role: Role,
        email: str | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        lifetime = expires_delta or timedelta(minutes=self.access_token_expires_minutes)
        to_encode: dict[str, Any] = {
            "sub": str(subject),
            "role": role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "typ": "access",
        }
        if email:
            to_encode["email"] = email
        if self.issuer:
            to_encode["iss"] = self.issuer
        if self.audience:
            to_encode["aud"] = self.audience
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={"verify_aud": self.audience is not None, "leeway": self.leeway_seconds},
            )
        except ExpiredSignatureError as exc:
            raise CredentialExpired("Token has expired") from exc
        except JWTError as exc:
            raise InvalidCredential("Token validation failed") from exc
