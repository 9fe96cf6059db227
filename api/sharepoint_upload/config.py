import os
from dataclasses import dataclass, field, fields

from .exceptions import ConfigurationError

# field name -> environment variable
ENV_VARS = {
    "tenant_id": "TENANT_ID",
    "client_id": "CLIENT_ID",
    "client_secret": "CLIENT_SECRET",
    "site_id": "SITE_ID",
    "drive_id": "DRIVE_ID",
    "folder_path": "FOLDER_PATH",
    "graph_endpoint": "GRAPH_ENDPOINT",
    "login_endpoint": "LOGIN_ENDPOINT",
    "log_level": "LOG_LEVEL",
}


@dataclass(frozen=True)
class UploadSettings:
    """Settings for the upload function.

    Built once at start-up and passed to the handler, which never reads the
    environment itself. Missing values stay empty so the host can start;
    `require` reports them when an upload actually needs them.
    """

    tenant_id: str = ""
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    site_id: str = ""
    drive_id: str = ""
    folder_path: str = ""
    graph_endpoint: str = "graph.microsoft.com"
    login_endpoint: str = "login.microsoftonline.com"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "UploadSettings":
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_VARS[f.name])
            if raw is None or not raw.strip():
                continue
            values[f.name] = raw.strip()
        return cls(**values)

    def require(self, *names: str) -> None:
        missing = [ENV_VARS[name] for name in names if not getattr(self, name)]
        if missing:
            raise ConfigurationError(missing)
