"""HTTP layer of the client, built on httpx."""

from types import TracebackType
from typing import Any

import httpx
import structlog

from client.session import Session

logger = structlog.get_logger()


class ApiError(Exception):
    """A non-success response (or a transport failure, with ``status_code`` 0).

    ``payload`` is the response's JSON body, kept verbatim for the errors slice.
    """

    def __init__(self, status_code: int, payload: Any) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"API error {status_code}")


class ApiClient:
    """Sends requests with the session's bearer token attached."""

    def __init__(
        self,
        session: Session,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._session = session
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def session(self) -> Session:
        return self._session

    async def request(self, method: str, path: str, json: Any | None = None) -> Any:
        try:
            response = await self._http.request(
                method,
                path,
                json=json,
                headers=self._session.auth_headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("api_transport_error", method=method, path=path, error=str(e))
            raise ApiError(0, {"error_code": "NETWORK_ERROR", "message": str(e)}) from e

        if response.is_success:
            return response.json() if response.content else None

        try:
            payload = response.json()
        except ValueError:
            payload = {"error_code": "HTTP_ERROR", "message": response.text}
        raise ApiError(response.status_code, payload)

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any | None = None) -> Any:
        return await self.request("POST", path, json=json if json is not None else {})

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
