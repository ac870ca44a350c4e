"""The GUID of an RSS item."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rsskit.xmlreader import XmlReader, element_text
from rsskit.xmlwriter import ToXml, XmlWriter

__all__ = ["Guid"]


@dataclass
class Guid(ToXml):
    """A unique identifier for an item, which may also be its permalink."""

    value: str = ""
    permalink: bool = True

    @classmethod
    def from_xml(cls, reader: XmlReader, attrs: Mapping[str, str]) -> "Guid":
        """Read a GUID whose start tag has just been consumed."""
        permalink = attrs.get("isPermaLink", "") != "false"
        value = element_text(reader) or ""
        return cls(value=value, permalink=permalink)

    def to_xml(self, writer: XmlWriter) -> None:
        attrs = {} if self.permalink else {"isPermaLink": "false"}
        writer.start("guid", attrs)
        writer.text(self.value)
        writer.end("guid")