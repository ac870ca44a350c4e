"""An item of an RSS channel."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rsskit.guid import Guid
from rsskit.source import Source
from rsskit.xmlreader import EventKind, UnexpectedEof, XmlReader, element_text, skip
from rsskit.xmlwriter import ToXml, XmlWriter

__all__ = ["Item"]

CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"

_TEXT_FIELDS = {
    "title": "title",
    "description": "description",
    "author": "author",
    "comments": "comments",
    "pubDate": "pub_date",
    "content:encoded": "content",
}


@dataclass
class Item(ToXml):
    """A single entry of a channel."""

    title: str | None = None
    link: str | None = None
    description: str | None = None
    """The item synopsis."""
    author: str | None = None
    """The e-mail address of the author of the item."""
    comments: str | None = None
    """The URL of the comments page for the item."""
    guid: Guid | None = None
    pub_date: str | None = None
    """The publication date as an RFC 2822 timestamp."""
    source: Source | None = None
    content: str | None = None
    """The HTML contents of the item."""

    @classmethod
    def from_xml(cls, reader: XmlReader, attrs: Mapping[str, str]) -> "Item":
        """Read an item whose start tag has just been consumed."""
        item = cls()
        while True:
            event = reader.next_event()
            if event.kind is EventKind.START:
                name = event.name
                if name == "guid":
                    item.guid = Guid.from_xml(reader, event.attrs)
                elif name == "source":
                    item.source = Source.from_xml(reader, event.attrs)
                elif name == "link":
                    # A link element without text (such as an Atom-style
                    # self-closing link) must not replace a real link.
                    link = element_text(reader)
                    if link:
                        item.link = link
                elif name in _TEXT_FIELDS:
                    setattr(item, _TEXT_FIELDS[name], element_text(reader))
                else:
                    skip(reader, name)
            elif event.kind is EventKind.END:
                break
            elif event.kind is EventKind.EOF:
                raise UnexpectedEof()
        return item

    def to_xml(self, writer: XmlWriter) -> None:
        writer.start("item")
        if self.title is not None:
            writer.write_text_element("title", self.title)
        if self.link is not None:
            writer.write_text_element("link", self.link)
        if self.description is not None:
            writer.write_cdata_element("description", self.description)
        if self.author is not None:
            writer.write_text_element("author", self.author)
        if self.comments is not None:
            writer.write_text_element("comments", self.comments)
        if self.guid is not None:
            writer.write_object(self.guid)
        if self.pub_date is not None:
            writer.write_text_element("pubDate", self.pub_date)
        if self.source is not None:
            writer.write_object(self.source)
        if self.content is not None:
            writer.write_cdata_element("content:encoded", self.content)
        writer.end("item")

    def used_namespaces(self) -> dict[str, str]:
        namespaces: dict[str, str] = {}
        if self.content is not None:
            namespaces["content"] = CONTENT_NAMESPACE
        return namespaces