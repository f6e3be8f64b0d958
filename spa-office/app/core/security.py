# app/core/security.py
import enum
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status


class Role(str, enum.Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


@dataclass(frozen=True)
class CurrentUser:
    """Identity forwarded by the upstream auth gateway.

    Passed explicitly into services so report scoping never depends on
    ambient session state.
    """

    id: UUID
    role: Role

    def has_role(self, role: Role) -> bool:
        return self.role == role

    @property
    def is_admin(self) -> bool:
        return self.has_role(Role.ADMIN)


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> CurrentUser:
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user id",
        )
    try:
        role = Role(x_user_role.lower())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown role: {x_user_role}",
        )
    return CurrentUser(id=user_id, role=role)


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return user
