"""
XML protocol: structured generator for request bodies, namespace-agnostic
reading helpers and error parsing.
"""

import xml.etree.ElementTree as ETree
from typing import Any, Optional

import httpx

from aws_sdk.errors import ServiceError


class StructuredXmlGenerator:
    """Writes an XML document element by element; the first element is the root."""

    def __init__(self) -> None:
        self._root: Optional[ETree.Element] = None
        self._stack: list[ETree.Element] = []

    def start_element(self, name: str, namespace: Optional[str] = None) -> None:
        if self._stack:
            element = ETree.SubElement(self._stack[-1], name)
        elif self._root is not None:
            raise ValueError("XML document already has a root")
        else:
            element = ETree.Element(name)
            self._root = element
        if namespace:
            element.set("xmlns", namespace)
        self._stack.append(element)

    def end_element(self) -> None:
        if not self._stack:
            raise ValueError("Unbalanced end of element")
        self._stack.pop()

    def write_value(self, value: Any) -> None:
        if not self._stack:
            raise ValueError("Value written outside of an element")
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._stack[-1].text = str(value)

    def write_element(self, name: str, value: Any) -> None:
        self.start_element(name)
        self.write_value(value)
        self.end_element()

    def get_bytes(self) -> bytes:
        if self._stack:
            raise ValueError("Unclosed XML element")
        if self._root is None:
            return b""
        return ETree.tostring(self._root, encoding="unicode").encode("utf-8")


class XmlProtocolFactory:
    format_name = "XML"

    def __init__(self, content_type: str = "application/xml"):
        self.content_type = content_type

    def create_generator(self) -> StructuredXmlGenerator:
        return StructuredXmlGenerator()


def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def find_child(element: ETree.Element, name: str) -> Optional[ETree.Element]:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def find_children(element: ETree.Element, name: str) -> list[ETree.Element]:
    return [child for child in element if local_name(child.tag) == name]


def child_text(element: ETree.Element, name: str) -> Optional[str]:
    child = find_child(element, name)
    if child is None:
        return None
    return child.text or ""


def child_int(element: ETree.Element, name: str) -> Optional[int]:
    text = child_text(element, name)
    return int(text) if text is not None else None


def child_bool(element: ETree.Element, name: str) -> Optional[bool]:
    text = child_text(element, name)
    return text.strip().lower() == "true" if text is not None else None


def parse_document(content: bytes) -> ETree.Element:
    return ETree.fromstring(content)


def parse_xml_error(response: httpx.Response) -> ServiceError:
    """Build a ServiceError from an <ErrorResponse> document."""
    code = f"HTTP{response.status_code}"
    message = response.text[:200]
    request_id = response.headers.get("x-amzn-RequestId")
    details: Optional[dict[str, Any]] = None
    try:
        root = parse_document(response.content)
    except ETree.ParseError:
        root = None
    if root is not None:
        error = find_child(root, "Error") if local_name(root.tag) != "Error" else root
        if error is not None:
            code = child_text(error, "Code") or code
            message = child_text(error, "Message") or message
            error_type = child_text(error, "Type")
            if error_type:
                details = {"type": error_type}
        request_id = child_text(root, "RequestId") or request_id
    return ServiceError(code, message, status_code=response.status_code, request_id=request_id, details=details)
