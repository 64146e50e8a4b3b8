"""
Account REST API for the logged-in account and public account lookups.
"""

from typing import Any, Optional

from fortnite.constants import (
    FRIENDS_ENDPOINT,
    KILL_SESSION_ENDPOINT,
    KILL_TYPE_OTHERS,
    OAUTH_EXCHANGE_ENDPOINT,
    OAUTH_VERIFY_ENDPOINT,
    PUBLIC_ACCOUNT_ENDPOINT,
)
from fortnite.transport.http import HttpClient


class AccountAPI:
    def __init__(self, http: HttpClient, account_id: str):
        self._http = http
        self.account_id = account_id

    async def kill_session(self) -> None:
        """Kill every other session the grant opened for this account."""
        await self._http.delete(KILL_SESSION_ENDPOINT, params={"killType": KILL_TYPE_OTHERS})

    async def info(self, account_id: Optional[str] = None) -> dict[str, Any]:
        return await self._http.get(f"{PUBLIC_ACCOUNT_ENDPOINT}{account_id or self.account_id}")

    async def lookup(self, display_name: str) -> dict[str, Any]:
        """Public account by display name."""
        return await self._http.get(f"{PUBLIC_ACCOUNT_ENDPOINT}displayName/{display_name}")

    async def display_names(self, account_ids: list[str]) -> dict[str, str]:
        """Map account ids to display names (one bulk request)."""
        accounts = await self._http.get(PUBLIC_ACCOUNT_ENDPOINT.rstrip("/"), params={"accountId": account_ids})
        return {a["id"]: a.get("displayName", "") for a in accounts or []}

    async def friends(self) -> list[dict[str, Any]]:
        return await self._http.get(f"{FRIENDS_ENDPOINT}{self.account_id}")

    async def add_friend(self, account_id: str) -> None:
        await self._http.post(f"{FRIENDS_ENDPOINT}{self.account_id}/{account_id}")

    async def remove_friend(self, account_id: str) -> None:
        await self._http.delete(f"{FRIENDS_ENDPOINT}{self.account_id}/{account_id}")

    async def exchange_code(self) -> str:
        """One-time exchange code for handing the session to another client."""
        result = await self._http.get(OAUTH_EXCHANGE_ENDPOINT)
        return result["code"]

    async def verify(self) -> dict[str, Any]:
        """Server-side view of the current access token."""
        return await self._http.get(OAUTH_VERIFY_ENDPOINT)
