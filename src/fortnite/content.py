"""
Read-only game content: news, storefront, cloud-storage system files.
"""

from typing import Any

from fortnite.constants import FORTNITE_ENDPOINT, NEWS_ENDPOINT
from fortnite.transport.http import HttpClient

SYSTEM_FILES_ENDPOINT = FORTNITE_ENDPOINT + "cloudstorage/system"


class NewsAPI:
    def __init__(self, http: HttpClient, language: str = "en"):
        self._http = http
        self.language = language

    async def pages(self) -> dict[str, Any]:
        return await self._http.get(NEWS_ENDPOINT, params={"lang": self.language})

    async def battle_royale(self) -> list[dict[str, Any]]:
        """Current BR news messages."""
        pages = await self.pages()
        news = pages.get("battleroyalenews", {}).get("news", {})
        return news.get("messages", [])


class StoreAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def catalog(self) -> dict[str, Any]:
        return await self._http.get(f"{FORTNITE_ENDPOINT}storefront/v2/catalog")

    async def storefront(self, name: str) -> dict[str, Any]:
        """One storefront (e.g. BRDailyStorefront) from the catalog."""
        catalog = await self.catalog()
        for front in catalog.get("storefronts", []):
            if front.get("name") == name:
                return front
        raise KeyError(name)


class SystemFilesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> list[dict[str, Any]]:
        return await self._http.get(SYSTEM_FILES_ENDPOINT)

    async def read(self, unique_filename: str) -> str:
        return await self._http.get(f"{SYSTEM_FILES_ENDPOINT}/{unique_filename}")
