"""
Route 53 client.
"""

from typing import Any

import httpx

from aws_sdk.client import AsyncAWSClient, SyncAWSClient
from aws_sdk.errors import ServiceError
from aws_sdk.models.route53 import (
    ChangeResourceRecordSetsRequest,
    ChangeResourceRecordSetsResult,
    ListResourceRecordSetsRequest,
    ListResourceRecordSetsResult,
)
from aws_sdk.protocol.xml_protocol import parse_xml_error
from aws_sdk.transform.route53 import (
    ChangeResourceRecordSetsRequestMarshaller,
    ListResourceRecordSetsRequestMarshaller,
    protocol_factory,
    unmarshall_change_resource_record_sets_result,
    unmarshall_list_resource_record_sets_result,
)


class AsyncRoute53Client(AsyncAWSClient):
    ENDPOINT_PREFIX = "route53"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        factory = protocol_factory()
        self._change_resource_record_sets = ChangeResourceRecordSetsRequestMarshaller(factory)
        self._list_resource_record_sets = ListResourceRecordSetsRequestMarshaller(factory)

    @staticmethod
    def _parse_error(response: httpx.Response) -> ServiceError:
        return parse_xml_error(response)

    async def change_resource_record_sets(
        self, request: ChangeResourceRecordSetsRequest,
    ) -> ChangeResourceRecordSetsResult:
        """Create, delete or upsert record sets in a hosted zone."""
        return await self._invoke(
            self._change_resource_record_sets, request, unmarshall_change_resource_record_sets_result,
        )

    async def list_resource_record_sets(
        self, request: ListResourceRecordSetsRequest,
    ) -> ListResourceRecordSetsResult:
        """List one page of record sets, starting at the given name/type/identifier."""
        return await self._invoke(
            self._list_resource_record_sets, request, unmarshall_list_resource_record_sets_result,
        )


class Route53Client(SyncAWSClient):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(AsyncRoute53Client(*args, **kwargs))

    def change_resource_record_sets(self, request: ChangeResourceRecordSetsRequest) -> ChangeResourceRecordSetsResult:
        return self._run(self._async.change_resource_record_sets(request))

    def list_resource_record_sets(self, request: ListResourceRecordSetsRequest) -> ListResourceRecordSetsResult:
        return self._run(self._async.list_resource_record_sets(request))
