from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog

from tracker_validator.core.application.tools.common.exceptions import ProviderError
from tracker_validator.infrastructure.observability.redaction_service import redact_text

logger = structlog.get_logger()


class BaseHttpClient(ABC):
    """Async JSON client shared by the tracker and VCS integrations.

    ``connect`` opens a pooled session reused by every request; without it each
    request runs on a short-lived client.
    """

    _PROVIDER: str = "HTTP"
    _TIMEOUT: float = 10.0

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    @abstractmethod
    def _get_headers(self) -> dict[str, str]: ...

    async def connect(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url, headers=self._get_headers(), timeout=self._TIMEOUT
            )

    async def disconnect(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json_data: Any) -> Any:
        return await self._request("POST", path, json_data=json_data)

    async def put(self, path: str, json_data: Any) -> Any:
        return await self._request("PUT", path, json_data=json_data)

    async def patch(self, path: str, json_data: Any) -> Any:
        return await self._request("PATCH", path, json_data=json_data)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """Send one request; translate transport and status failures into ProviderError."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            if self._client is not None:
                response = await self._client.request(method, url, params=params, json=json_data)
            else:
                async with httpx.AsyncClient(
                    headers=self._get_headers(), timeout=self._TIMEOUT
                ) as client:
                    response = await client.request(method, url, params=params, json=json_data)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            details = redact_text(exc.response.text)
            logger.error(
                "HTTP request rejected",
                processing_status="ERROR",
                error_type="HTTPStatusError",
                error_details=details,
                source_system=self._PROVIDER,
                method=method,
                path=path,
                status_code=status_code,
            )
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"{method} {path} failed: {details}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "HTTP transport failure",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=redact_text(str(exc)),
                source_system=self._PROVIDER,
                method=method,
                path=path,
            )
            raise ProviderError(
                provider=self._PROVIDER,
                message=f"{method} {path} failed: {redact_text(str(exc))}",
            ) from exc
        if response.status_code == 204 or not response.content:
            return None
        return response.json()
