class UploadError(Exception):
    """Base class for errors raised while handling an upload."""


class RequestValidationError(UploadError):
    pass


class ConfigurationError(UploadError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required setting(s): {', '.join(self.missing)}")


class AuthenticationError(UploadError):
    pass


class GraphRequestError(UploadError):
    """Non-2xx response from Microsoft Graph."""

    def __init__(self, status_code: int, message: str, code: str = None):
        self.status_code = status_code
        self.code = code
        super().__init__(message)
