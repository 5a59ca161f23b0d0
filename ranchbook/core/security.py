from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import jwt

from ranchbook.config import Settings
from ranchbook.core.errors import Unauthenticated, ValidationFailed


@dataclass(frozen=True)
class IdentityAssertion:
    subject_id: str
    email: Optional[str]
    given_name: str = ""
    family_name: str = ""
    avatar_url: Optional[str] = None


def get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _decode_jwt(token: str, settings: Settings) -> dict:
    if not settings.IDENTITY_JWT_SECRET:
        raise Unauthenticated("Identity provider is not configured")

    options = {"verify_aud": bool(settings.IDENTITY_JWT_AUDIENCE), "require": ["sub"]}
    try:
        return jwt.decode(
            token,
            settings.IDENTITY_JWT_SECRET,
            algorithms=[settings.IDENTITY_JWT_ALGORITHM],
            audience=settings.IDENTITY_JWT_AUDIENCE,
            issuer=settings.IDENTITY_JWT_ISSUER,
            options=options,
        )
    except jwt.PyJWTError as exc:
        raise Unauthenticated("Invalid identity assertion", error=str(exc)) from exc


def verify_identity_assertion(token: str, settings: Settings) -> IdentityAssertion:
    claims = _decode_jwt(token, settings)

    subject_id = str(claims.get("sub") or "").strip()
    if not subject_id:
        raise Unauthenticated("Identity assertion has no subject")

    email = (claims.get("email") or "").strip()
    if not email:
        raise ValidationFailed("No email found in identity assertion")

    return IdentityAssertion(
        subject_id=subject_id,
        email=email,
        given_name=claims.get("given_name") or "",
        family_name=claims.get("family_name") or "",
        avatar_url=claims.get("picture") or None,
    )


__all__ = [
    "IdentityAssertion",
    "get_bearer_token",
    "verify_identity_assertion",
]
