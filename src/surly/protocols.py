"""Codec contracts implemented by the URL value type."""

from typing import Protocol, Self, runtime_checkable
from xml.etree.ElementTree import Element


@runtime_checkable
class TextCodec(Protocol):
    """Binding through plain text (config loaders, env vars, CLI flags)."""

    @classmethod
    def from_text(cls, text: str) -> Self:
        ...

    def to_text(self) -> str:
        ...


@runtime_checkable
class JSONCodec(Protocol):
    """A JSON string scalar."""

    @classmethod
    def from_json(cls, document: str | bytes) -> Self:
        ...

    def to_json(self) -> str:
        ...


@runtime_checkable
class XMLCodec(Protocol):
    """XML element content and attribute values."""

    @classmethod
    def from_xml_element(cls, element: Element) -> Self:
        ...

    def to_xml_element(self, tag: str, parent: Element | None = None) -> Element:
        ...

    @classmethod
    def from_xml_attribute(cls, element: Element, name: str) -> Self:
        ...

    def to_xml_attribute(self, element: Element, name: str) -> None:
        ...
