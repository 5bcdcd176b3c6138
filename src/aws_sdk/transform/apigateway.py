"""
API Gateway marshallers and unmarshallers (REST-JSON).
"""

import json
from typing import Any

from aws_sdk.models.apigateway import MethodResponse, PatchOperation
from aws_sdk.protocol.json_protocol import JsonProtocolFactory, StructuredJsonGenerator
from aws_sdk.protocol.marshaller import RequestMarshaller

SERVICE_NAME = "AmazonApiGateway"
METHOD_RESPONSE_PATH = "/restapis/{restapi_id}/resources/{resource_id}/methods/{http_method}/responses/{status_code}"
METHOD_RESPONSE_PATH_PARAMS = {
    "restapi_id": "rest_api_id",
    "resource_id": "resource_id",
    "http_method": "http_method",
    "status_code": "status_code",
}


def protocol_factory() -> JsonProtocolFactory:
    return JsonProtocolFactory(protocol_version="1.1", content_type="application/json")


class PatchOperationJsonMarshaller:
    """Writes one PatchOperation as a JSON object."""

    def marshall(self, patch_operation: PatchOperation, generator: StructuredJsonGenerator) -> None:
        generator.write_start_object()
        if patch_operation.op is not None:
            generator.write_field_name("op")
            generator.write_value(patch_operation.op)
        if patch_operation.path is not None:
            generator.write_field_name("path")
            generator.write_value(patch_operation.path)
        if patch_operation.value is not None:
            generator.write_field_name("value")
            generator.write_value(patch_operation.value)
        if patch_operation.from_ is not None:
            generator.write_field_name("from")
            generator.write_value(patch_operation.from_)
        generator.write_end_object()


patch_operation_marshaller = PatchOperationJsonMarshaller()


class UpdateMethodResponseRequestMarshaller(RequestMarshaller):
    service_name = SERVICE_NAME
    http_method = "PATCH"
    uri_template = METHOD_RESPONSE_PATH
    path_params = METHOD_RESPONSE_PATH_PARAMS

    def write_body(self, model: Any, generator: StructuredJsonGenerator) -> None:
        generator.write_start_object()
        if model.patch_operations is not None:
            generator.write_field_name("patchOperations")
            generator.write_start_array()
            for patch_operation in model.patch_operations:
                if patch_operation is not None:
                    patch_operation_marshaller.marshall(patch_operation, generator)
            generator.write_end_array()
        generator.write_end_object()


class GetMethodResponseRequestMarshaller(RequestMarshaller):
    service_name = SERVICE_NAME
    http_method = "GET"
    uri_template = METHOD_RESPONSE_PATH
    path_params = METHOD_RESPONSE_PATH_PARAMS
    has_body = False


def unmarshall_patch_operation(data: dict[str, Any]) -> PatchOperation:
    return PatchOperation.model_validate(data)


def unmarshall_method_response(content: bytes) -> MethodResponse:
    return MethodResponse.model_validate(json.loads(content) if content else {})
