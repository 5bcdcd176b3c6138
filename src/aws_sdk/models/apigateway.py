"""
API Gateway models: method responses and JSON patch operations.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from aws_sdk.models.base import AWSModel


class Op(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class PatchOperation(AWSModel):
    """A single update operation applied to a resource, in JSON patch style."""

    op: Optional[str] = Field(default=None, alias="op")
    path: Optional[str] = Field(default=None, alias="path")
    value: Optional[str] = Field(default=None, alias="value")
    from_: Optional[str] = Field(default=None, alias="from")  # source path for move/copy


class GetMethodResponseRequest(AWSModel):
    rest_api_id: Optional[str] = Field(default=None, alias="restApiId")
    resource_id: Optional[str] = Field(default=None, alias="resourceId")
    http_method: Optional[str] = Field(default=None, alias="httpMethod")
    status_code: Optional[str] = Field(default=None, alias="statusCode")


class UpdateMethodResponseRequest(AWSModel):
    """Updates an existing MethodResponse resource."""

    rest_api_id: Optional[str] = Field(default=None, alias="restApiId")
    resource_id: Optional[str] = Field(default=None, alias="resourceId")
    http_method: Optional[str] = Field(default=None, alias="httpMethod")
    status_code: Optional[str] = Field(default=None, alias="statusCode")
    patch_operations: Optional[list[PatchOperation]] = Field(default=None, alias="patchOperations")

    def with_patch_operations(self, *operations: PatchOperation) -> "UpdateMethodResponseRequest":
        """Append operations, creating the list if it is unset."""
        if self.patch_operations is None:
            self.patch_operations = list(operations)
        else:
            self.patch_operations.extend(operations)
        return self


class MethodResponse(AWSModel):
    """Result of GetMethodResponse and UpdateMethodResponse."""

    status_code: Optional[str] = Field(default=None, alias="statusCode")
    response_parameters: Optional[dict[str, bool]] = Field(default=None, alias="responseParameters")
    response_models: Optional[dict[str, str]] = Field(default=None, alias="responseModels")
