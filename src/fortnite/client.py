"""
Fortnite / AsyncFortnite: main clients.
"""

import asyncio
from typing import Any, Optional

from fortnite.account import AccountAPI
from fortnite.auth import Auth
from fortnite.content import NewsAPI, StoreAPI, SystemFilesAPI
from fortnite.leaderboards import LeaderboardAPI
from fortnite.profile import ProfileAPI
from fortnite.status import StatusAPI
from fortnite.transport.http import DEFAULT_TIMEOUT, HttpClient


class AsyncFortnite:
    """Async Fortnite client (primary).

    Extra keyword arguments are passed to every httpx.AsyncClient the client builds
    (transport=, proxy=, headers=, ...).
    """

    def __init__(self, device_id: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT, **http_options: Any):
        self.auth = Auth(device_id, timeout, **http_options)
        self._account_info: Optional[dict[str, Any]] = None

    async def __aenter__(self) -> "AsyncFortnite":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def login(self, email: str, password: str, device_id: Optional[str] = None) -> None:
        """Log in with an Epic email and password.

        Raises TwoFactorRequired when the account has 2FA on; finish with two_factor().
        A device_id that already passed 2FA once lets the login skip the challenge.
        """
        await self.auth.login(email, password, device_id)

    async def two_factor(self, code: str) -> None:
        """Complete a pending 2FA challenge with the emailed / authenticator code."""
        await self.auth.two_factor(code)

    @property
    def authenticated(self) -> bool:
        return self.auth.authenticated

    @property
    def http(self) -> HttpClient:
        """Authenticated pipeline for calls the accessors don't cover."""
        return self.auth.http

    @property
    def account_id(self) -> str:
        return self.auth.session.account_id

    @property
    def in_app_id(self) -> str:
        """In-app id (leaderboard cohort owner). Empty when the service omits it."""
        return self.auth.session.in_app_id

    @property
    def device_id(self) -> str:
        """Device id of this client. Reuse it on later logins to skip 2FA."""
        return self.auth.device_id

    async def account_info(self) -> dict[str, Any]:
        """Public account info of the logged-in user, fetched once."""
        if self._account_info is None:
            self._account_info = await self.account().info()
        return self._account_info

    async def display_name(self) -> str:
        return (await self.account_info())["displayName"]

    def account(self) -> AccountAPI:
        return AccountAPI(self.http, self.account_id)

    def profile(self, display_name: Optional[str] = None) -> ProfileAPI:
        """Profile of `display_name`, or of the logged-in user."""
        return ProfileAPI(self.http, self.account(), display_name)

    def leaderboards(self, platform: str, mode: str) -> LeaderboardAPI:
        """See leaderboards.Platform and leaderboards.Mode."""
        return LeaderboardAPI(self.http, self.account(), self.in_app_id, platform, mode)

    def news(self, language: str = "en") -> NewsAPI:
        return NewsAPI(self.http, language)

    def store(self) -> StoreAPI:
        return StoreAPI(self.http)

    def status(self) -> StatusAPI:
        return StatusAPI(self.http)

    def system_files(self) -> SystemFilesAPI:
        return SystemFilesAPI(self.http)

    async def close(self) -> None:
        await self.auth.close()


class Fortnite:
    """Sync wrapper around AsyncFortnite. Runs the event loop internally.

    Resource accessors are async; drive them through `aio` on your own event loop.
    """

    def __init__(self, **kwargs: Any):
        self.aio = AsyncFortnite(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def login(self, email: str, password: str, device_id: Optional[str] = None) -> None:
        self._run(self.aio.login(email, password, device_id))

    def two_factor(self, code: str) -> None:
        self._run(self.aio.two_factor(code))

    @property
    def authenticated(self) -> bool:
        return self.aio.authenticated

    @property
    def account_id(self) -> str:
        return self.aio.account_id

    @property
    def in_app_id(self) -> str:
        return self.aio.in_app_id

    @property
    def device_id(self) -> str:
        return self.aio.device_id

    def account_info(self) -> dict[str, Any]:
        return self._run(self.aio.account_info())

    def display_name(self) -> str:
        return self._run(self.aio.display_name())

    def close(self) -> None:
        self._run(self.aio.close())
        self._loop.close()
