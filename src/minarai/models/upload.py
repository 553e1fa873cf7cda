"""
Attachment upload results.

Plain dicts, because callers branch on their keys:

- ``{"ok": True, "result": {"url": ...}}``  server answered ``message == "ok"``
- ``{"ok": True, "error": {"url": ...}}``   server answered with any other message
- ``{"error": "url does not exist"}``       no ``url`` in the response (no ``ok`` key)
- ``{"err": exc}``                          the HTTP call itself failed
"""

from typing import Any
from urllib.parse import urlencode

URL_MISSING = "url does not exist"
UPLOAD_PATH = "upload-image"

UploadResult = dict[str, Any]


def upload_endpoint(image_url: str) -> str:
    base = image_url[:-1] if image_url.endswith("/") else image_url
    return f"{base}/{UPLOAD_PATH}"


def with_identity_query(url: str, application_id: Any, user_id: Any) -> str:
    query = urlencode({
        "applicationId": "" if application_id is None else application_id,
        "userId": "" if user_id is None else user_id,
    })
    return f"{url}?{query}"


def from_response(data: Any, application_id: Any, user_id: Any) -> UploadResult:
    url = data.get("url") if isinstance(data, dict) else None
    if not url:
        return {"error": URL_MISSING}
    url = with_identity_query(url, application_id, user_id)
    key = "result" if data.get("message") == "ok" else "error"
    return {"ok": True, key: {"url": url}}


def from_failure(err: BaseException) -> UploadResult:
    return {"err": err}
