"""The image of an RSS channel."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rsskit.xmlreader import EventKind, UnexpectedEof, XmlReader, element_text, skip
from rsskit.xmlwriter import ToXml, XmlWriter

__all__ = ["Image"]

_REQUIRED = ("url", "title", "link")
_OPTIONAL = ("width", "height", "description")


@dataclass
class Image(ToXml):
    """An image shown with a channel.

    A missing width should be taken as 80 and a missing height as 31.
    """

    url: str = ""
    """The URL of the image."""
    title: str = ""
    """A description of the image, used as the HTML ``alt`` attribute."""
    link: str = ""
    """The URL the image links to."""
    width: str | None = None
    height: str | None = None
    description: str | None = None
    """The text for the HTML ``title`` attribute of the link around the image."""

    @classmethod
    def from_xml(cls, reader: XmlReader, attrs: Mapping[str, str]) -> "Image":
        """Read an image whose start tag has just been consumed."""
        values: dict[str, str | None] = {}
        while True:
            event = reader.next_event()
            if event.kind is EventKind.START:
                if event.name in _REQUIRED:
                    values[event.name] = element_text(reader) or ""
                elif event.name in _OPTIONAL:
                    values[event.name] = element_text(reader)
                else:
                    skip(reader, event.name)
            elif event.kind is EventKind.END:
                break
            elif event.kind is EventKind.EOF:
                raise UnexpectedEof()
        return cls(**values)

    def to_xml(self, writer: XmlWriter) -> None:
        writer.start("image")
        writer.write_text_element("url", self.url)
        writer.write_text_element("title", self.title)
        writer.write_text_element("link", self.link)
        for name in _OPTIONAL:
            value = getattr(self, name)
            if value is not None:
                writer.write_text_element(name, value)
        writer.end("image")