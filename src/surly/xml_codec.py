"""
XML codec for element content and attribute values.

Decoding relies on xml.etree.ElementTree, which already merges CDATA
sections into element text. Encoding never emits CDATA.
"""

from typing import Self
from xml.etree import ElementTree as ET


class XMLCodecMixin:
    __slots__ = ()

    @classmethod
    def from_xml_element(cls, element: ET.Element) -> Self:
        """Construct from the element's text content."""
        return cls("".join(element.itertext()).strip())

    def to_xml_element(self, tag: str, parent: ET.Element | None = None) -> ET.Element:
        """Return a new element (appended to parent if given) holding the URL as text."""
        if parent is None:
            element = ET.Element(tag)
        else:
            element = ET.SubElement(parent, tag)
        element.text = self.raw
        return element

    @classmethod
    def from_xml_attribute(cls, element: ET.Element, name: str) -> Self:
        """Construct from an attribute value. A missing attribute is empty."""
        return cls(element.get(name, "").strip())

    def to_xml_attribute(self, element: ET.Element, name: str) -> None:
        element.set(name, self.raw)

    @classmethod
    def from_xml(cls, document: str | bytes) -> Self:
        """Parse a document whose root element holds the URL."""
        return cls.from_xml_element(ET.fromstring(document))

    def to_xml(self, tag: str = "url") -> str:
        return tostring(self.to_xml_element(tag))


def tostring(element: ET.Element) -> str:
    """Serialize with explicit end tags, so an empty URL stays ``<url></url>``."""
    return ET.tostring(element, encoding="unicode", short_empty_elements=False)
