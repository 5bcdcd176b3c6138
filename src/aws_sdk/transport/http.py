"""
HTTP transport: executes marshalled requests against a service endpoint.
"""

import logging
from typing import Callable, Optional

import httpx

from aws_sdk.config import USER_AGENT
from aws_sdk.errors import ClientError
from aws_sdk.transport.request import Request

LOG = logging.getLogger(__name__)

Signer = Callable[[Request], None]


class HttpClient:
    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        user_agent: str = USER_AGENT,
        signer: Optional[Signer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._endpoint = endpoint.rstrip("/")
        self._signer = signer
        self._client = httpx.AsyncClient(
            base_url=self._endpoint,
            headers={"User-Agent": user_agent, "Accept": "application/json, application/xml"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def execute(self, request: Request) -> httpx.Response:
        if self._signer is not None:
            self._signer(request)
        LOG.debug("%s %s%s", request.http_method, self._endpoint, request.resource_path)
        try:
            resp = await self._client.request(
                request.http_method,
                request.resource_path,
                params=request.parameters or None,
                headers=request.headers,
                content=request.content,
            )
        except httpx.HTTPError as e:
            LOG.warning("Request to %s failed: %s", request.service_name, e)
            raise ClientError(f"Unable to execute HTTP request: {e}") from e
        LOG.debug("%s responded HTTP %s", request.service_name, resp.status_code)
        return resp

    async def close(self) -> None:
        await self._client.aclose()
