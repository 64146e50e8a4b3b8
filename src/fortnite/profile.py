"""
Battle Royale profile stats.
"""

from typing import Any, Optional

from fortnite.account import AccountAPI
from fortnite.constants import FORTNITE_ENDPOINT
from fortnite.transport.http import HttpClient


class ProfileAPI:
    def __init__(self, http: HttpClient, account: AccountAPI, display_name: Optional[str] = None):
        self._http = http
        self._account = account
        self.display_name = display_name

    async def account_id(self) -> str:
        """Own account when no display name was given, else a lookup by name."""
        if self.display_name is None:
            return self._account.account_id
        found = await self._account.lookup(self.display_name)
        return found["id"]

    async def stats(self, window: str = "alltime") -> list[dict[str, Any]]:
        account_id = await self.account_id()
        return await self._http.get(f"{FORTNITE_ENDPOINT}stats/accountId/{account_id}/bulk/window/{window}")
