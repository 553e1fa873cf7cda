"""
Multipart upload HTTP client.
"""

from typing import Any, Optional

import httpx

from minarai.errors import MinaraiError


class UploadClient:
    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            headers={"User-Agent": "minarai-client/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def post_form(
        self,
        url: str,
        data: dict[str, str],
        files: dict[str, Any],
    ) -> Any:
        """POST a multipart form and return the decoded JSON body.

        Raises MinaraiError on HTTP >= 400 and httpx.HTTPError on network failure.
        """
        resp = await self._client.post(url, data=data, files=files)
        if resp.status_code >= 400:
            raise MinaraiError("http_error", f"HTTP {resp.status_code}: {resp.text[:200]}")
        return resp.json()

    async def close(self) -> None:
        await self._client.aclose()
