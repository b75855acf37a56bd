"""
Memos Backend — Current User Dependency
========================================

What:  Resolves the authenticated user for a request.
Why:   Handlers take the user as an explicit parameter instead of reading
       a per-request global, so services can be called with any user id.
How:   Session handling belongs to the upstream auth layer, which forwards
       the authenticated user id in a header (settings.user_id_header,
       X-User-ID by default). Requests without a usable id are rejected
       before any handler runs.
Who:   Every /api/tag route declares `user: CurrentUser = Depends(get_current_user)`.
"""

from fastapi import Request
from pydantic import BaseModel

from app.config import settings
from app.exceptions import UnauthorizedError


class CurrentUser(BaseModel):
    id: int


async def get_current_user(request: Request) -> CurrentUser:
    """
    FastAPI dependency returning the caller.

    Raises:
        UnauthorizedError: Header missing, not an integer, or not positive (→ 401)
    """
    raw = request.headers.get(settings.user_id_header)
    if raw is None:
        raise UnauthorizedError()

    try:
        user_id = int(raw.strip())
    except ValueError:
        raise UnauthorizedError(context={"header": settings.user_id_header})

    if user_id <= 0:
        raise UnauthorizedError(context={"header": settings.user_id_header})

    return CurrentUser(id=user_id)
