"""
Weekly wins leaderboards, scoped to the account's cohort.
"""

from typing import Any

from fortnite.account import AccountAPI
from fortnite.constants import FORTNITE_ENDPOINT
from fortnite.transport.http import HttpClient


class Platform:
    PC = "pc"
    XBOX = "xb1"
    PS4 = "ps4"


class Mode:
    SOLO = "p2"
    DUO = "p10"
    SQUAD = "p9"


class LeaderboardAPI:
    def __init__(self, http: HttpClient, account: AccountAPI, in_app_id: str, platform: str, mode: str):
        self._http = http
        self._account = account
        self._in_app_id = in_app_id
        self.playlist = f"{platform}_m0_{mode}"

    async def cohort(self) -> list[str]:
        """Account ids sharing this account's leaderboard cohort."""
        owner = self._in_app_id or self._account.account_id
        result = await self._http.get(
            f"{FORTNITE_ENDPOINT}game/v2/leaderboards/cohort/{owner}",
            params={"playlist": self.playlist},
        )
        return result.get("cohortAccounts", [])

    async def top(self, limit: int = 50) -> list[dict[str, Any]]:
        """Ranked entries with display names resolved."""
        cohort = await self.cohort()
        result = await self._http.post(
            f"{FORTNITE_ENDPOINT}leaderboards/type/global/stat/br_placetop1_{self.playlist}/window/weekly",
            json=cohort,
            params={"ownertype": "1", "pageNumber": "0", "itemsPerPage": str(limit)},
        )
        entries = result.get("entries", [])
        names = await self._account.display_names([e["accountId"] for e in entries]) if entries else {}
        return [
            {**e, "displayName": names.get(e["accountId"], "")}
            for e in entries
        ]
