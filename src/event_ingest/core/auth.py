"""Opt-in bearer-token auth for the event routes.

Producers sign short-lived HS256 tokens with the shared
``SERVICE_AUTH_SECRET``; the ``sub`` claim names the producer. With no secret
configured the routes are open.
"""

import time
from typing import Optional

import jwt
from fastapi import HTTPException, Request, status

TOKEN_TTL_SECONDS = 300


def generate_service_token(
    service_name: str, secret: str, expiry_seconds: int = TOKEN_TTL_SECONDS
) -> str:
    now = time.time()
    claims = {"sub": service_name, "iat": now, "exp": now + expiry_seconds}
    return jwt.encode(claims, secret, algorithm="HS256")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class ServiceAuthDependency:
    """FastAPI dependency that resolves to the calling producer's name.

    Resolves to None when auth is disabled.
    """

    def __init__(self, secret: str):
        self.secret = secret

    async def __call__(self, request: Request) -> Optional[str]:
        if not self.secret:
            return None

        scheme, _, token = request.headers.get("Authorization", "").partition(" ")
        if scheme.lower() != "bearer" or not token:
            raise _unauthorized("Missing Authorization header with Bearer token")

        try:
            claims = jwt.decode(token, self.secret, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            raise _unauthorized("Token has expired")
        except jwt.InvalidTokenError as e:
            raise _unauthorized(f"Invalid token: {e}")

        if not claims.get("sub"):
            raise _unauthorized("Invalid token: missing 'sub' claim")
        return claims["sub"]
