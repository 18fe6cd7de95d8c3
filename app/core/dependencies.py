# app/core/dependencies.py
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.ownership import OwnershipGuard
from app.core.security import TokenAuthenticator
from app.core.session import SessionCoordinator
from app.database import get_db
from app.domains.user.service import UserService
from app.exceptions.base import AuthRequiredError
from models import User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)
auth = TokenAuthenticator()


def get_session(request: Request) -> SessionCoordinator:
    """Session of the current request."""
    return SessionCoordinator(request.session)


def get_ownership_guard(db: AsyncSession = Depends(get_db)) -> OwnershipGuard:
    return OwnershipGuard(db)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: SessionCoordinator = Depends(get_session),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Get the authenticated user from the session or an identity-provider token.

    A valid bearer token establishes a session; an existing session is
    renewed on every authenticated fetch.

    Returns:
        User: Current authenticated user

    Raises:
        AuthRequiredError: If there is no session and no valid token, or the user no longer exists
    """
    user_id = session.user_id
    from_token = False

    if user_id is None:
        if not credentials or not credentials.credentials:
            raise AuthRequiredError()
        user_id = auth.user_id_from_token(credentials.credentials)
        from_token = True

    user = await UserService(db).get_user_by_id(user_id)
    if not user:
        logger.warning("Session refers to unknown user %s", user_id)
        session.clear()
        raise AuthRequiredError()

    if from_token:
        session.establish(user.id, user.primary_email)
    else:
        session.refresh()

    # Add user info to request state for logging
    request.state.user_id = user.id
    return user
