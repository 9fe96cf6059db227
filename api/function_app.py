import logging

import azure.functions as func
from dotenv import load_dotenv

from sharepoint_upload import UploadSettings, handle_http

load_dotenv()
settings = UploadSettings.from_env()
try:
    logging.getLogger("sharepoint_upload").setLevel(settings.log_level.upper())
except ValueError:
    logging.getLogger("sharepoint_upload").setLevel(logging.INFO)

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)


@app.route(route="upload", methods=["POST"])
def upload(req: func.HttpRequest) -> func.HttpResponse:
    logging.info("Upload function processing a request.")
    return handle_http(req, settings)
