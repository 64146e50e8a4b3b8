"""
REST HTTP client. One httpx.AsyncClient bound to one auth middleware.
"""

from typing import Any, Optional

import httpx

from fortnite.errors import TransportError
from fortnite.transport.response import parse_response

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "fortnite-py/0.1.0"


class HttpClient:
    def __init__(self, auth: httpx.Auth, timeout: float = DEFAULT_TIMEOUT, **http_options: Any):
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json", **http_options.pop("headers", {})}
        self.auth = auth
        self._client = httpx.AsyncClient(auth=auth, headers=headers, timeout=timeout, **http_options)

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        return parse_response(resp)

    async def get(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self._request("GET", url, params=params)

    async def post(
        self,
        url: str,
        data: Optional[dict[str, str]] = None,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """POST a form-urlencoded (`data`) or JSON (`json`) body."""
        return await self._request("POST", url, data=data, json=json, params=params)

    async def delete(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self._request("DELETE", url, params=params)

    async def close(self) -> None:
        await self._client.aclose()
