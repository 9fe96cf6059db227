import base64
import string
from dataclasses import dataclass

from .exceptions import RequestValidationError

MISSING_FIELDS_MESSAGE = "Request must include filename and fileContent."
SUCCESS_MESSAGE = "File uploaded successfully."
FAILURE_PREFIX = "Upload failed: "

_B64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


@dataclass(frozen=True)
class UploadRequest:
    filename: str
    file_content: str

    @classmethod
    def from_body(cls, body) -> "UploadRequest":
        """Validate a parsed JSON body.

        Both fields must be non-empty strings; anything else is rejected
        before the content is decoded or any call goes out.
        """
        if not isinstance(body, dict):
            raise RequestValidationError(MISSING_FIELDS_MESSAGE)
        filename = body.get("filename")
        file_content = body.get("fileContent")
        if not isinstance(filename, str) or not filename:
            raise RequestValidationError(MISSING_FIELDS_MESSAGE)
        if not isinstance(file_content, str) or not file_content:
            raise RequestValidationError(MISSING_FIELDS_MESSAGE)
        return cls(filename=filename, file_content=file_content)


@dataclass(frozen=True)
class UploadResult:
    status_code: int
    message: str

    @classmethod
    def ok(cls) -> "UploadResult":
        return cls(200, SUCCESS_MESSAGE)

    @classmethod
    def bad_request(cls) -> "UploadResult":
        return cls(400, MISSING_FIELDS_MESSAGE)

    @classmethod
    def failed(cls, exc: Exception) -> "UploadResult":
        return cls(500, f"{FAILURE_PREFIX}{exc}")


def decode_file_content(text: str) -> bytes:
    """Decode base64 text without ever rejecting it.

    Accepts the standard and URL-safe alphabets, skips characters outside
    them, stops at the first '=' and drops a dangling final character, so
    malformed input decodes to empty or truncated bytes instead of raising.
    """
    text = text.split("=", 1)[0].translate(_URLSAFE_TO_STANDARD)
    data = "".join(c for c in text if c in _B64_ALPHABET)
    if len(data) % 4 == 1:
        data = data[:-1]
    return base64.b64decode(data + "=" * (-len(data) % 4))
