"""Actor pre-check

Authentication happens upstream; the gateway forwards the caller's identity
and guild role as trusted headers. Every ledger route requires an officer.
"""

from typing import Optional
from fastapi import Header, status
from pydantic import BaseModel
from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError


class Actor(BaseModel):
    id: str
    role: str


async def require_officer(
    x_actor_id: Optional[str] = Header(default=None),
    x_actor_role: Optional[str] = Header(default=None),
) -> Actor:
    if ApplicationConfig.AUTH_DISABLED:
        return Actor(id=x_actor_id or "system", role=x_actor_role or "admin")

    if not x_actor_id or not x_actor_role:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="Missing actor headers"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if x_actor_role.lower() not in {r.lower() for r in ApplicationConfig.OFFICER_ROLES}:
        raise ClientError(
            Error(
                code="FORBIDDEN",
                message="Officer role required",
                reason=f"role={x_actor_role}",
            ),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return Actor(id=x_actor_id, role=x_actor_role)
