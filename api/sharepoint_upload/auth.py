"""Bearer tokens for Microsoft Graph via the client credentials flow."""
import logging
from typing import Optional, Protocol

import msal

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def graph_scope(graph_endpoint: str = "graph.microsoft.com") -> str:
    return f"https://{graph_endpoint}/.default"


class TokenProvider(Protocol):
    def fetch_token(self, scope: str) -> str:
        ...


class ClientSecretTokenProvider:
    """App-only tokens from a tenant/client id/secret triple.

    The MSAL application is created on the first fetch, so authority and
    credential problems surface as errors from `fetch_token`. Each provider
    keeps only MSAL's in-memory cache; nothing outlives the provider.
    """

    def __init__(self, tenant_id: str, client_id: str, client_secret: str,
                 login_endpoint: str = "login.microsoftonline.com"):
        self.tenant_id = tenant_id
        self.client_id = client_id
        self._client_secret = client_secret
        self.authority = f"https://{login_endpoint}/{tenant_id}"
        self._app: Optional[msal.ConfidentialClientApplication] = None

    @classmethod
    def from_settings(cls, settings) -> "ClientSecretTokenProvider":
        settings.require("tenant_id", "client_id", "client_secret")
        return cls(settings.tenant_id, settings.client_id, settings.client_secret,
                   login_endpoint=settings.login_endpoint)

    def _application(self) -> msal.ConfidentialClientApplication:
        if self._app is None:
            self._app = msal.ConfidentialClientApplication(
                self.client_id,
                client_credential=self._client_secret,
                authority=self.authority,
            )
        return self._app

    def fetch_token(self, scope: str) -> str:
        logger.debug("Requesting token for %s from %s", scope, self.authority)
        result = self._application().acquire_token_for_client(scopes=[scope])
        if not result or "access_token" not in result:
            result = result or {}
            reason = result.get("error_description") or result.get("error") or "no token returned"
            logger.error("Token request failed: %s", result.get("error", "unknown_error"))
            raise AuthenticationError(reason)
        return result["access_token"]
