"""
Request middlewares for the two pipelines.

DeviceAuth is installed before login: it identifies the launcher client and the device.
TokenAuth is installed after a token grant: it attaches the bearer token and refreshes
it when expired. Both are httpx.Auth flows, so they run inside the client's send().
"""

import asyncio
import logging
import time
from typing import AsyncGenerator, Generator

import httpx
from pydantic import ValidationError

from fortnite.constants import (
    DEVICE_ID_HEADER,
    EPIC_LAUNCHER_TOKEN,
    OAUTH_TOKEN_ENDPOINT,
    TOKEN_EXPIRY_MARGIN,
    TOKEN_TYPE,
)
from fortnite.errors import ServiceError
from fortnite.models.token import TokenResponse, TokenSet
from fortnite.transport.response import parse_response

logger = logging.getLogger(__name__)

# Never copied from the outgoing request onto a refresh grant.
REQUEST_SPECIFIC_HEADERS = {
    "authorization", "content-type", "content-length", "transfer-encoding", "host", DEVICE_ID_HEADER.lower(),
}


def device_headers(device_id: str) -> dict[str, str]:
    return {
        "Authorization": f"basic {EPIC_LAUNCHER_TOKEN}",
        DEVICE_ID_HEADER: device_id,
    }


class DeviceAuth(httpx.Auth):
    """Stamps the launcher client credentials and the device id on every request."""

    def __init__(self, device_id: str):
        self.device_id = device_id

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers.update(device_headers(self.device_id))
        yield request


class TokenAuth(httpx.Auth):
    """Bearer-token middleware with single-flight refresh.

    The first request to find the token expired performs the refresh grant while holding
    the lock. Requests queued behind it re-check expiry once they get the lock and reuse
    the new token. A failed refresh keeps the previous TokenSet.
    """

    requires_response_body = True

    def __init__(self, token: TokenResponse, device_id: str):
        self.device_id = device_id
        self._token_set = TokenSet.issue(token, time.time())
        self._lock = asyncio.Lock()

    @property
    def expired(self) -> bool:
        return self._token_set.is_expired(time.time(), TOKEN_EXPIRY_MARGIN)

    def build_refresh_request(self, request: httpx.Request) -> httpx.Request:
        """Refresh grant inheriting the outgoing request's client headers and timeout."""
        headers = {k: v for k, v in request.headers.items() if k.lower() not in REQUEST_SPECIFIC_HEADERS}
        headers.update(device_headers(self.device_id))
        return httpx.Request(
            "POST",
            OAUTH_TOKEN_ENDPOINT,
            headers=headers,
            extensions=dict(request.extensions),
            data={
                "grant_type": "refresh_token",
                "refresh_token": self._token_set.refresh_token,
                "includePerms": "true",
                "token_type": TOKEN_TYPE,
            },
        )

    def sync_auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        raise RuntimeError("TokenAuth requires an httpx.AsyncClient")

    async def async_auth_flow(self, request: httpx.Request) -> AsyncGenerator[httpx.Request, httpx.Response]:
        async with self._lock:
            if self.expired:
                logger.debug("Access token expired, refreshing")
                refresh_response = yield self.build_refresh_request(request)
                payload = parse_response(refresh_response)
                try:
                    token = TokenResponse.model_validate(payload)
                except ValidationError as e:
                    raise ServiceError("invalid_token_response", f"Malformed refresh response: {e}",
                                       refresh_response.status_code, payload) from e
                self._token_set = TokenSet.issue(token, time.time())
            access_token = self._token_set.access_token

        request.headers["Authorization"] = f"bearer {access_token}"
        yield request
