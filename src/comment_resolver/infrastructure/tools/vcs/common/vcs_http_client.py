from typing import Any

import httpx


class VcsHttpClient:
    """Async REST client shared by the hosting platform adapters.

    A fresh ``httpx.AsyncClient`` is opened per call; callers pass either a
    path relative to ``base_url`` or an absolute URL (pagination links).
    """

    def __init__(self, base_url: str, headers: dict[str, str], timeout_s: float):
        self.base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json", **headers}
        self._timeout_s = timeout_s

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            return await client.get(self._url(path), headers=self._headers, params=params)

    async def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout_s) as client:
            return await client.post(self._url(path), headers=self._headers, json=json_data)
