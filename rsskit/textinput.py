"""The text input box of an RSS channel."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rsskit.xmlreader import EventKind, UnexpectedEof, XmlReader, element_text, skip
from rsskit.xmlwriter import ToXml, XmlWriter

__all__ = ["TextInput"]

_FIELDS = ("title", "description", "name", "link")


@dataclass
class TextInput(ToXml):
    """A text input box that can be shown with a channel."""

    title: str = ""
    """The label of the Submit button for the text input."""
    description: str = ""
    """A description of the text input."""
    name: str = ""
    """The name of the text object."""
    link: str = ""
    """The URL of the script that processes the text input request."""

    @classmethod
    def from_xml(cls, reader: XmlReader, attrs: Mapping[str, str]) -> "TextInput":
        """Read a text input whose start tag has just been consumed."""
        values: dict[str, str] = {}
        while True:
            event = reader.next_event()
            if event.kind is EventKind.START:
                if event.name in _FIELDS:
                    values[event.name] = element_text(reader) or ""
                else:
                    skip(reader, event.name)
            elif event.kind is EventKind.END:
                break
            elif event.kind is EventKind.EOF:
                raise UnexpectedEof()
        return cls(**values)

    def to_xml(self, writer: XmlWriter) -> None:
        writer.start("textInput")
        writer.write_text_element("title", self.title)
        writer.write_text_element("description", self.description)
        writer.write_text_element("name", self.name)
        writer.write_text_element("link", self.link)
        writer.end("textInput")