"""Security related functions."""

import jwt
from jwt import InvalidTokenError

from app.core.config import settings
from app.exceptions.base import AuthRequiredError


class TokenAuthenticator:
    """
    Verifies identity-provider tokens.

    The identity provider issues JSON Web Tokens signed with the shared
    secret key; the ``sub`` claim carries the user ID.

    :ivar secret_key: The secret key used to verify JWT tokens.
    :type secret_key: str
    :ivar algorithm: The signing algorithm accepted.
    :type algorithm: str
    """

    def __init__(self, secret_key: str | None = None, algorithm: str | None = None):
        self.secret_key = secret_key or settings.secret_key
        self.algorithm = algorithm or settings.algorithm

    def verify_token(self, token: str) -> dict:
        """
        Decodes and validates the token signature and expiry.

        :param token: The JWT token to be verified.
        :return: The decoded payload.
        :raises AuthRequiredError: If the token is invalid or carries no usable subject.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            raise AuthRequiredError(f"Invalid authentication token: {str(e)}") from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.isdigit():
            raise AuthRequiredError("Invalid token payload - missing user ID")
        return payload

    def user_id_from_token(self, token: str) -> int:
        return int(self.verify_token(token)["sub"])

    def create_token(self, user_id: int, **claims) -> str:
        """Issue a token for ``user_id``; used by trusted tooling and tests."""
        payload = {"sub": str(user_id), **claims}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
