from .auth import ClientSecretTokenProvider, TokenProvider, graph_scope
from .config import UploadSettings
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    GraphRequestError,
    RequestValidationError,
    UploadError,
)
from .graph import GraphDriveClient, build_upload_path
from .handler import handle_http, handle_upload
from .models import UploadRequest, UploadResult, decode_file_content

__all__ = [
    "AuthenticationError",
    "ClientSecretTokenProvider",
    "ConfigurationError",
    "GraphDriveClient",
    "GraphRequestError",
    "RequestValidationError",
    "TokenProvider",
    "UploadError",
    "UploadRequest",
    "UploadResult",
    "UploadSettings",
    "build_upload_path",
    "decode_file_content",
    "graph_scope",
    "handle_http",
    "handle_upload",
]
