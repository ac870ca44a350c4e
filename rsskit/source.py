"""The source channel of an RSS item."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rsskit.xmlreader import XmlReader, element_text
from rsskit.xmlwriter import ToXml, XmlWriter

__all__ = ["Source"]


@dataclass
class Source(ToXml):
    """The RSS channel an item came from."""

    url: str = ""
    title: str | None = None

    @classmethod
    def from_xml(cls, reader: XmlReader, attrs: Mapping[str, str]) -> "Source":
        """Read a source whose start tag has just been consumed."""
        url = attrs.get("url", "")
        title = element_text(reader)
        return cls(url=url, title=title)

    def to_xml(self, writer: XmlWriter) -> None:
        writer.start("source", {"url": self.url})
        if self.title is not None:
            writer.text(self.title)
        writer.end("source")