"""Shared request dependencies."""

from uuid import UUID

from fastapi import Header, HTTPException, status


async def optional_user_id(
    x_user_id: str | None = Header(default=None),
) -> UUID | None:
    """Return the caller's id when the request carries a valid one."""
    if not x_user_id:
        return None
    try:
        return UUID(x_user_id)
    except ValueError:
        return None


async def require_user_id(
    x_user_id: str | None = Header(default=None),
) -> UUID:
    """Ensure the request identifies its caller."""
    user_id = await optional_user_id(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return user_id
