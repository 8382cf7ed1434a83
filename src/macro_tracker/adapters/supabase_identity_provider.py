"""Supabase Auth identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from macro_tracker.domain.models import UserRecord
from macro_tracker.services.users import IdentityProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolves access tokens through Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> UserRecord | None:
        """Return the user for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UserRecord(id=UUID(str(response.user.id)), email=response.user.email)
