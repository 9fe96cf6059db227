import logging
from typing import Optional

import requests

from .auth import TokenProvider, graph_scope
from .exceptions import GraphRequestError

logger = logging.getLogger(__name__)


def build_upload_path(drive_id: str, folder_path: str, filename: str) -> str:
    """Graph path for a simple (single PUT) upload into a drive.

    `folder_path` is trimmed of surrounding slashes and, when anything is
    left, joined to `filename` with exactly one '/'. `filename` is used as is.
    """
    folder = (folder_path or "").strip("/")
    prefix = f"{folder}/" if folder else ""
    return f"drives/{drive_id}/root:/{prefix}{filename}:/content"


def _error_message(response: requests.Response):
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"], error.get("code")
    text = (response.text or "").strip()
    return text or f"{response.status_code} {response.reason}", None


class GraphDriveClient:
    def __init__(self, token_provider: TokenProvider, graph_endpoint: str = "graph.microsoft.com",
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.token_provider = token_provider
        self.base_url = f"https://{graph_endpoint}/v1.0"
        self.scope = graph_scope(graph_endpoint)
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, token_provider: TokenProvider, settings) -> "GraphDriveClient":
        settings.require("drive_id")
        return cls(token_provider, graph_endpoint=settings.graph_endpoint)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def upload_content(self, path: str, content: bytes) -> dict:
        """PUT `content` at `path`, replacing any existing file there."""
        token = self.token_provider.fetch_token(self.scope)
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/octet-stream",
        }
        response = self.session.put(url, headers=headers, data=content, timeout=self.timeout)
        if not response.ok:
            message, code = _error_message(response)
            logger.error("Graph upload to %s failed with %s (%s)", path, response.status_code, code)
            raise GraphRequestError(response.status_code, message, code)
        logger.info("Uploaded %d bytes to %s", len(content), path)
        try:
            return response.json()
        except ValueError:
            return {}
