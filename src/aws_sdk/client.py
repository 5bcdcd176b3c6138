"""
Shared plumbing for service clients: marshal, execute, unmarshal.
"""

import asyncio
from typing import Any, Callable, Optional, TypeVar

import httpx

from aws_sdk.config import ClientConfig
from aws_sdk.errors import ClientError, ServiceError
from aws_sdk.protocol.marshaller import RequestMarshaller
from aws_sdk.transport.http import HttpClient, Signer

T = TypeVar("T")


class AsyncAWSClient:
    """Async client base. Subclasses set ENDPOINT_PREFIX and the error parser."""

    ENDPOINT_PREFIX: str = ""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        signer: Optional[Signer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClientConfig()
        self.http = HttpClient(
            endpoint=self.config.endpoint_for(self.ENDPOINT_PREFIX),
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            signer=signer,
            transport=transport,
        )

    @staticmethod
    def _parse_error(response: httpx.Response) -> ServiceError:
        raise NotImplementedError

    async def _invoke(
        self,
        marshaller: RequestMarshaller,
        model: Any,
        unmarshaller: Callable[[bytes], T],
    ) -> T:
        request = marshaller.marshall(model)
        response = await self.http.execute(request)
        if response.status_code >= 400:
            raise self._parse_error(response)
        try:
            return unmarshaller(response.content)
        except Exception as e:
            raise ClientError(f"Unable to unmarshall response: {e}") from e

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncAWSClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class SyncAWSClient:
    """Sync wrapper base. Runs the wrapped async client on its own event loop."""

    def __init__(self, async_client: AsyncAWSClient):
        self._async = async_client
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> ClientConfig:
        return self._async.config

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "SyncAWSClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
