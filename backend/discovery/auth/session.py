"""Session collaborator: reads an optional Bearer JWT into a SessionInfo."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import jwt
from flask import current_app, request
from loguru import logger


class Role(str, Enum):
    STUDENT = "student"
    ADVISER = "adviser"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


@dataclass(frozen=True, slots=True)
class SessionInfo:
    is_authenticated: bool = False
    user_id: Optional[str] = None
    role: Optional[Role] = None


ANONYMOUS = SessionInfo()


def encode(payload: Dict[str, Any]) -> str:
    secret = current_app.config.get("JWT_SECRET", "change-me")
    alg = current_app.config.get("JWT_ALG", "HS256")
    return jwt.encode(payload, secret, algorithm=alg)


def decode(token: str) -> Dict[str, Any]:
    secret = current_app.config.get("JWT_SECRET", "change-me")
    alg = current_app.config.get("JWT_ALG", "HS256")
    return jwt.decode(token, secret, algorithms=[alg], options={"verify_aud": False})


def _role(claims: Dict[str, Any]) -> Role:
    try:
        return Role(str(claims.get("role") or Role.STUDENT.value).lower())
    except ValueError:
        return Role.STUDENT


def current_session() -> SessionInfo:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return ANONYMOUS
    token = auth.split(" ", 1)[1]
    try:
        claims = decode(token)
    except jwt.PyJWTError as e:
        logger.info("rejected bearer token: {}", e)
        return ANONYMOUS
    return SessionInfo(is_authenticated=True, user_id=claims.get("sub"), role=_role(claims))


def is_authenticated() -> bool:
    return current_session().is_authenticated


def current_user_role() -> Optional[Role]:
    return current_session().role
