"""Shared fixtures: an in-memory Epic account service behind httpx.MockTransport."""

import asyncio
from typing import Any, Optional
from urllib.parse import parse_qsl

import httpx
import pytest

from fortnite import AsyncFortnite
from fortnite.transport import auth as transport_auth

ACCOUNT_ID = "acc-123"
CHALLENGE = "chal-T"
OTP_CODE = "123456"
PASSWORD = "hunter2"


def error(status: int, code: str, message: str = "", **extra: Any) -> httpx.Response:
    return httpx.Response(status, json={
        "errorCode": code,
        "errorMessage": message or code,
        "messageVars": [],
        "numericErrorCode": 1000,
        "originatingService": "com.epicgames.account.public",
        "intent": "prod",
        **extra,
    })


class FakeEpic:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.issued = 0
        self.expires_in = 28800
        self.in_app_id: Optional[str] = "inapp-9"
        self.two_factor = False
        self.fail_kill = False
        self.fail_refresh = False
        self.malformed_token = False
        self.routes: dict[tuple[str, str], httpx.Response] = {
            ("GET", f"/account/api/public/account/{ACCOUNT_ID}"):
                httpx.Response(200, json={"id": ACCOUNT_ID, "displayName": "Ninja"}),
        }

    def route(self, method: str, path: str, status: int = 200, json: Any = None) -> None:
        self.routes[(method, path)] = httpx.Response(status, json=json)

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @property
    def grants(self) -> list[dict[str, str]]:
        return [form(r) for r in self.requests_to("POST", "/account/api/oauth/token")]

    def _token(self) -> httpx.Response:
        if self.malformed_token:
            return httpx.Response(200, json={"unexpected": True})
        self.issued += 1
        body = {
            "access_token": f"access-{self.issued}",
            "refresh_token": f"refresh-{self.issued}",
            "expires_in": self.expires_in,
            "account_id": ACCOUNT_ID,
            "token_type": "bearer",
        }
        if self.in_app_id is not None:
            body["in_app_id"] = self.in_app_id
        return httpx.Response(200, json=body)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/account/api/oauth/token":
            data = form(request)
            grant = data.get("grant_type")
            if grant == "password":
                if data.get("password") != PASSWORD:
                    return error(400, "errors.com.epicgames.account.invalid_account_credentials")
                if self.two_factor:
                    return error(400, "errors.com.epicgames.common.two_factor_authentication.required",
                                 challenge=CHALLENGE)
                return self._token()
            if grant == "otp":
                if data.get("challenge") != CHALLENGE or data.get("otp") != OTP_CODE:
                    return error(400, "errors.com.epicgames.accountportal.mfa_code_invalid")
                return self._token()
            if grant == "refresh_token":
                await asyncio.sleep(0.01)
                if self.fail_refresh:
                    return error(400, "errors.com.epicgames.account.auth_token.invalid_refresh_token")
                if data.get("refresh_token") != f"refresh-{self.issued}":
                    return error(400, "errors.com.epicgames.account.auth_token.unknown_refresh_token")
                return self._token()

        if request.method == "DELETE" and path == "/account/api/oauth/sessions/kill":
            if self.fail_kill:
                return error(500, "errors.com.epicgames.common.server_error")
            return httpx.Response(204)

        if (request.method, path) in self.routes:
            template = self.routes[(request.method, path)]
            return httpx.Response(template.status_code, content=template.content, headers=template.headers)

        return error(404, "errors.com.epicgames.common.not_found")


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def time(self) -> float:
        return self.now


def form(request: httpx.Request) -> dict[str, str]:
    return dict(parse_qsl(request.content.decode()))


def bearer(request: httpx.Request) -> str:
    return request.headers.get("Authorization", "")


def make_client(fake: FakeEpic, **kwargs: Any) -> AsyncFortnite:
    return AsyncFortnite(transport=httpx.MockTransport(fake.handler), **kwargs)


@pytest.fixture
def fake() -> FakeEpic:
    return FakeEpic()


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    clock = FakeClock()
    monkeypatch.setattr(transport_auth, "time", clock)
    return clock
