from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Optional

from aiohttp import ClientResponse, ClientSession
from pydantic import BaseModel

from create_strapi_app.core.settings import Settings


def _package_version() -> str:
    try:
        return version("create-strapi-app")
    except PackageNotFoundError:
        return "0.0.0"


class CloudResponse(BaseModel):
    status: int
    data: Any = None


class CloudApiError(Exception):
    """Ответ облачного API со статусом ошибки; тело доступно в response.data."""

    def __init__(self, response: CloudResponse):
        super().__init__(f"Strapi Cloud API responded with status {response.status}")
        self.response = response


async def _read_body(resp: ClientResponse) -> Any:
    if resp.content_type == "application/json":
        return await resp.json()
    return await resp.text()


class CloudApiService:
    def __init__(self, settings: Settings, token: Optional[str] = None):
        self.base_url = settings.cloud_api_url.rstrip("/")
        self.headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": f"create-strapi-app/{_package_version()}",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> CloudResponse:
        async with ClientSession(headers=self.headers) as session:
            async with session.request(method, f"{self.base_url}{path}", json=json) as resp:
                response = CloudResponse(status=resp.status, data=await _read_body(resp))
        if response.status >= 400:
            raise CloudApiError(response)
        return response

    async def config(self) -> CloudResponse:
        return await self._request("GET", "/config")

    async def create_project(self, payload: Dict[str, Any]) -> CloudResponse:
        return await self._request("POST", "/project", json=payload)

    async def user_info(self) -> CloudResponse:
        return await self._request("GET", "/user")


def cloud_api_factory(settings: Settings, token: Optional[str] = None) -> CloudApiService:
    return CloudApiService(settings, token=token)
