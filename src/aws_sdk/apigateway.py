"""
API Gateway client.
"""

from typing import Any

import httpx

from aws_sdk.client import AsyncAWSClient, SyncAWSClient
from aws_sdk.errors import ServiceError
from aws_sdk.models.apigateway import GetMethodResponseRequest, MethodResponse, UpdateMethodResponseRequest
from aws_sdk.protocol.json_protocol import parse_json_error
from aws_sdk.transform.apigateway import (
    GetMethodResponseRequestMarshaller,
    UpdateMethodResponseRequestMarshaller,
    protocol_factory,
    unmarshall_method_response,
)


class AsyncApiGatewayClient(AsyncAWSClient):
    ENDPOINT_PREFIX = "apigateway"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        factory = protocol_factory()
        self._update_method_response = UpdateMethodResponseRequestMarshaller(factory)
        self._get_method_response = GetMethodResponseRequestMarshaller(factory)

    @staticmethod
    def _parse_error(response: httpx.Response) -> ServiceError:
        return parse_json_error(response)

    async def get_method_response(self, request: GetMethodResponseRequest) -> MethodResponse:
        """Describe a MethodResponse resource."""
        return await self._invoke(self._get_method_response, request, unmarshall_method_response)

    async def update_method_response(self, request: UpdateMethodResponseRequest) -> MethodResponse:
        """Apply patch operations to a MethodResponse resource."""
        return await self._invoke(self._update_method_response, request, unmarshall_method_response)


class ApiGatewayClient(SyncAWSClient):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(AsyncApiGatewayClient(*args, **kwargs))

    def get_method_response(self, request: GetMethodResponseRequest) -> MethodResponse:
        return self._run(self._async.get_method_response(request))

    def update_method_response(self, request: UpdateMethodResponseRequest) -> MethodResponse:
        return self._run(self._async.update_method_response(request))
