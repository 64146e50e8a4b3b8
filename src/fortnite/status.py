"""
Lightswitch service status.
"""

from typing import Any

from fortnite.constants import STATUS_ENDPOINT
from fortnite.transport.http import HttpClient


class StatusAPI:
    def __init__(self, http: HttpClient, service_id: str = "Fortnite"):
        self._http = http
        self.service_id = service_id

    async def get(self) -> dict[str, Any]:
        result = await self._http.get(STATUS_ENDPOINT, params={"serviceId": self.service_id})
        return result[0] if result else {}

    async def is_online(self) -> bool:
        return (await self.get()).get("status") == "UP"
