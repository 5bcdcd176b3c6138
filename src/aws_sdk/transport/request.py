"""
Wire-level request produced by a marshaller and executed by the HTTP client.
"""

from typing import Any, Optional

import httpx


class Request:
    def __init__(self, original_request: Any, service_name: str, http_method: str = "GET"):
        self.original_request = original_request
        self.service_name = service_name
        self.http_method = http_method
        self.resource_path = "/"
        self.parameters: dict[str, str] = {}
        self.headers = httpx.Headers()
        self.content: Optional[bytes] = None

    def add_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def add_parameter(self, name: str, value: str) -> None:
        self.parameters[name] = value

    def __repr__(self) -> str:
        return f"<Request {self.service_name} {self.http_method} {self.resource_path}>"
