"""
Request marshalling: one populated model in, one wire Request out.

A marshaller subclass declares its operation as class attributes and
implements ``write_body`` for the fields bound to the payload. Marshallers
hold only their protocol factory and can be shared between calls.
"""

import logging
from typing import Any, ClassVar, Optional
from urllib.parse import quote

from aws_sdk.errors import InvalidArgumentError, MarshallingError
from aws_sdk.transport.request import Request

LOG = logging.getLogger(__name__)


def url_encode(value: Any) -> str:
    """Percent-encode every reserved character, slashes included."""
    return quote(str(value), safe="~")


def resolve_path(template: str, values: dict[str, Optional[Any]]) -> str:
    """Replace each ``{placeholder}`` with its encoded value, or "" when the value is absent."""
    path = template
    for placeholder, value in values.items():
        path = path.replace("{" + placeholder + "}", url_encode(value) if value is not None else "")
    return path


class RequestMarshaller:
    service_name: ClassVar[str]
    http_method: ClassVar[str]
    uri_template: ClassVar[str]
    # placeholder -> model attribute
    path_params: ClassVar[dict[str, str]] = {}
    # query parameter name -> model attribute
    query_params: ClassVar[dict[str, str]] = {}
    has_body: ClassVar[bool] = True

    def __init__(self, protocol_factory: Any):
        self.protocol_factory = protocol_factory

    def marshall(self, model: Any) -> Request:
        if model is None:
            raise InvalidArgumentError()

        request = self.create_request(model)
        request.resource_path = resolve_path(
            self.uri_template,
            {placeholder: getattr(model, attr) for placeholder, attr in self.path_params.items()},
        )
        for name, attr in self.query_params.items():
            value = getattr(model, attr)
            if value is not None:
                request.add_parameter(name, str(value))

        if self.has_body:
            try:
                generator = self.protocol_factory.create_generator()
                self.write_body(model, generator)
                content = generator.get_bytes()
            except Exception as e:
                raise MarshallingError(
                    f"Unable to marshall request to {self.protocol_factory.format_name}: {e}"
                ) from e
            request.content = content
            request.add_header("Content-Length", str(len(content)))
            if "Content-Type" not in request.headers:
                request.add_header("Content-Type", self.protocol_factory.content_type)

        LOG.debug("Marshalled %s: %s %s", type(model).__name__, request.http_method, request.resource_path)
        return request

    def create_request(self, model: Any) -> Request:
        return Request(model, self.service_name, self.http_method)

    def write_body(self, model: Any, generator: Any) -> None:
        raise NotImplementedError
