# tests/conftest.py
from __future__ import annotations

import base64
import json

import azure.functions as func
import pytest

from sharepoint_upload import GraphDriveClient, UploadSettings

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


# --------------------------------------------------------------------
# Fakes for the identity provider and the Graph HTTP session
# --------------------------------------------------------------------
class FakeTokenProvider:
    def __init__(self, token="fake-token", error=None):
        self.token = token
        self.error = error
        self.scopes = []

    def fetch_token(self, scope):
        self.scopes.append(scope)
        if self.error is not None:
            raise self.error
        return self.token


class FakeResponse:
    def __init__(self, status_code=201, payload=None, text=None, reason="Created"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self.text = text if text is not None else (json.dumps(payload) if payload is not None else "")

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    def __init__(self, response=None):
        self.response = response or FakeResponse(201, {"id": "01ABC", "name": "uploaded"})
        self.calls = []
        self.closed = False

    def put(self, url, headers=None, data=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "data": data, "timeout": timeout})
        return self.response

    def close(self):
        self.closed = True


# --------------------------------------------------------------------
# Fixtures
# --------------------------------------------------------------------
@pytest.fixture
def settings() -> UploadSettings:
    return UploadSettings(
        tenant_id="tenant-123",
        client_id="client-456",
        client_secret="s3cret",
        site_id="site-789",
        drive_id="b!drive",
        folder_path="Submissions",
    )


@pytest.fixture
def token_provider() -> FakeTokenProvider:
    return FakeTokenProvider()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def factories(token_provider, session):
    """Keyword arguments for handle_upload that keep everything in-process."""
    return {
        "token_provider_factory": lambda settings: token_provider,
        "client_factory": lambda provider, settings: GraphDriveClient(
            provider, graph_endpoint=settings.graph_endpoint, session=session
        ),
    }


@pytest.fixture
def pdf_b64() -> str:
    return base64.b64encode(PDF_BYTES).decode("ascii")


def make_request(body) -> func.HttpRequest:
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    return func.HttpRequest(
        method="POST",
        url="/api/upload",
        headers={"Content-Type": "application/json"},
        body=body,
    )
