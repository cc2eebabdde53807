"""Supabase Auth gateway."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from calorie_tracker.domain.entries import AuthenticatedUser
from calorie_tracker.services.auth import AuthGateway

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Resolves access tokens through Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Return the user for a Supabase access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.warning("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return AuthenticatedUser(id=UUID(response.user.id), email=response.user.email)
