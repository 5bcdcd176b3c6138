"""
JSON protocol: structured generator for request bodies and error parsing.
"""

import json
from typing import Any, Optional

import httpx

from aws_sdk.errors import ServiceError


class StructuredJsonGenerator:
    """Streaming-style writer that builds a JSON document container by container."""

    def __init__(self) -> None:
        self._root: Any = None
        self._stack: list[Any] = []
        self._field_name: Optional[str] = None

    def write_start_object(self) -> None:
        self._open({})

    def write_end_object(self) -> None:
        self._close(dict)

    def write_start_array(self) -> None:
        self._open([])

    def write_end_array(self) -> None:
        self._close(list)

    def write_field_name(self, name: str) -> None:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise ValueError(f"Field name {name!r} written outside of an object")
        self._field_name = name

    def write_value(self, value: Any) -> None:
        self._add(value)

    def get_bytes(self) -> bytes:
        if self._stack:
            raise ValueError("Unclosed JSON container")
        if self._root is None:
            return b""
        return json.dumps(self._root, separators=(",", ":")).encode("utf-8")

    def _open(self, container: Any) -> None:
        if self._stack:
            self._add(container)
        elif self._root is not None:
            raise ValueError("JSON document already has a root")
        else:
            self._root = container
        self._stack.append(container)

    def _close(self, kind: type) -> None:
        if not self._stack or not isinstance(self._stack[-1], kind):
            raise ValueError(f"Unbalanced end of {kind.__name__}")
        self._stack.pop()

    def _add(self, value: Any) -> None:
        if not self._stack:
            raise ValueError("Value written outside of a container")
        top = self._stack[-1]
        if isinstance(top, dict):
            if self._field_name is None:
                raise ValueError("Value written in an object without a field name")
            top[self._field_name] = value
            self._field_name = None
        else:
            top.append(value)


class JsonProtocolFactory:
    format_name = "JSON"

    def __init__(self, protocol_version: str = "1.1", content_type: Optional[str] = None):
        self.protocol_version = protocol_version
        self._content_type = content_type

    @property
    def content_type(self) -> str:
        return self._content_type or f"application/x-amz-json-{self.protocol_version}"

    def create_generator(self) -> StructuredJsonGenerator:
        return StructuredJsonGenerator()


def parse_json_error(response: httpx.Response) -> ServiceError:
    """Build a ServiceError from a JSON error response."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    code = response.headers.get("x-amzn-ErrorType") or body.get("__type") or body.get("code")
    if code:
        # "NotFoundException:http://internal.amazon.com/..." or "ns#NotFoundException"
        code = code.split(":", 1)[0].rsplit("#", 1)[-1]
    else:
        code = f"HTTP{response.status_code}"
    message = body.get("message") or body.get("Message") or response.text[:200]
    return ServiceError(
        code,
        message,
        status_code=response.status_code,
        request_id=response.headers.get("x-amzn-RequestId"),
        details=body or None,
    )
