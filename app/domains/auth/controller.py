"""Session controller endpoints."""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_session
from app.core.session import SessionCoordinator

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/logout")
async def logout(session: SessionCoordinator = Depends(get_session)) -> bool:
    """Clear the current session.

    Answers ``true`` when a session was cleared and ``false`` when there was
    nothing to clear. No login is required to call it.
    """
    return session.logout()
