import logging

import azure.functions as func

from .auth import ClientSecretTokenProvider
from .config import UploadSettings
from .exceptions import RequestValidationError
from .graph import GraphDriveClient, build_upload_path
from .models import UploadRequest, UploadResult, decode_file_content

logger = logging.getLogger(__name__)


def handle_upload(body, settings: UploadSettings,
                  token_provider_factory=ClientSecretTokenProvider.from_settings,
                  client_factory=GraphDriveClient.from_settings) -> UploadResult:
    """Validate, decode and upload one file.

    Depends only on its arguments: `token_provider_factory(settings)` and
    `client_factory(token_provider, settings)` are called once per call so
    each upload authenticates on its own.
    """
    try:
        request = UploadRequest.from_body(body)
    except RequestValidationError:
        logger.warning("Rejected upload request: filename or fileContent missing")
        return UploadResult.bad_request()

    try:
        content = decode_file_content(request.file_content)
        token_provider = token_provider_factory(settings)
        with client_factory(token_provider, settings) as client:
            path = build_upload_path(settings.drive_id, settings.folder_path, request.filename)
            client.upload_content(path, content)
    except Exception as e:
        logger.exception("Upload of %s failed", request.filename)
        return UploadResult.failed(e)

    return UploadResult.ok()


def handle_http(req: func.HttpRequest, settings: UploadSettings, **factories) -> func.HttpResponse:
    try:
        body = req.get_json()
    except ValueError:
        body = None

    result = handle_upload(body, settings, **factories)
    return func.HttpResponse(
        body=result.message,
        status_code=result.status_code,
        mimetype="text/plain"
    )
