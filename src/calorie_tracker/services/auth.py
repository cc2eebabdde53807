"""Caller authentication against the hosted auth provider."""

from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.entries import AuthenticatedUser
from calorie_tracker.domain.errors import AuthenticationError


class AuthGateway(Protocol):
    """Interface for resolving access tokens to users."""

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Return the user owning the token, or None when it is invalid."""


@dataclass
class AuthService:
    """Resolves the caller from an Authorization header."""

    gateway: AuthGateway

    def authenticate(self, authorization: str | None) -> AuthenticatedUser:
        """Return the user for a ``Bearer <token>`` header value."""
        token = parse_bearer_token(authorization)
        if token is None:
            raise AuthenticationError()
        user = self.gateway.get_user(token)
        if user is None:
            raise AuthenticationError()
        return user


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from a bearer Authorization header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
