from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from app.services.user_service import get_user_by_id


async def get_current_user(request: Request) -> Optional[dict]:
    """
    Resolve the logged-in user from the session cookie
    Returns None when nobody is logged in; a stale session is cleared
    """
    user_id = request.session.get("user_id")
    if not user_id:
        return None

    user = await get_user_by_id(str(user_id))
    if not user or not user.get("is_active"):
        request.session.clear()
        return None

    return user


async def get_current_client(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Require an authenticated user with the client role"""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please log in to continue",
        )

    if user.get("role") != "client":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only clients can access this page",
        )

    return user


async def get_current_client_id(client: dict = Depends(get_current_client)) -> str:
    """Extract client ID from the authenticated session"""
    return client["id"]
