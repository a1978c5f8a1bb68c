"""Service account credentials and ID token minting."""
import asyncio
import logging
from typing import Any, Dict

import google.auth.transport.requests
from google.oauth2 import service_account

from ..config import Settings

logger = logging.getLogger(__name__)


def build_credentials_info(settings: Settings) -> Dict[str, Any]:
    """Service account info in the shape of a downloaded JSON key file."""
    return {
        "type": "service_account",
        "client_email": settings.gcp_client_email,
        "private_key": settings.gcp_private_key,
        "project_id": settings.gcp_project_id,
        "token_uri": settings.gcp_token_uri,
    }


class IdTokenProvider:
    """Mints Google-signed ID tokens for a target audience."""

    def __init__(self, credentials_info: Dict[str, Any]):
        self._credentials_info = credentials_info

    def _fetch_id_token_sync(self, audience: str) -> str:
        credentials = service_account.IDTokenCredentials.from_service_account_info(
            self._credentials_info,
            target_audience=audience,
        )
        credentials.refresh(google.auth.transport.requests.Request())
        return credentials.token

    async def fetch_id_token(self, audience: str) -> str:
        """
        Return a fresh ID token whose audience is ``audience``.

        The refresh talks to the token endpoint with a blocking transport,
        so it runs in the default executor.
        """
        loop = asyncio.get_running_loop()
        token = await loop.run_in_executor(None, self._fetch_id_token_sync, audience)
        logger.debug(f"Minted ID token for audience {audience}")
        return token
