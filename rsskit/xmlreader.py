"""A small pull-style XML reader and helpers for reading feed elements.

The reader keeps qualified names exactly as written (``content:encoded``,
``atom:link``), expands self-closing elements into a start and an end event,
trims whitespace around text and drops text that is only whitespace.
"""

from __future__ import annotations

import enum
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

__all__ = [
    "FeedError",
    "UnexpectedEof",
    "EventKind",
    "Event",
    "XmlReader",
    "element_text",
    "skip",
]

_WHITESPACE = " \t\r\n"

_NAMED_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}

_ENTITY_RE = re.compile(r"&(#?\w*);|&")
_TAG_BODY_RE = re.compile(r"""(?:[^>"']|"[^"]*"|'[^']*')*>""")
_DECLARATION_RE = re.compile(r"<!(?:[^>\[]|\[[^\]]*\])*>")
_NAME_RE = re.compile(r"[^\s/>]+")
_ATTR_RE = re.compile(r"""([^\s=/]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


class FeedError(Exception):
    """Raised when a feed document cannot be read."""


class UnexpectedEof(FeedError):
    """Raised when the input ends before an element is complete."""

    def __init__(self, message: str = "reached end of input before the element was complete"):
        super().__init__(message)


class EventKind(enum.Enum):
    """The kinds of event the reader produces."""

    START = "start"
    END = "end"
    TEXT = "text"
    CDATA = "cdata"
    EOF = "eof"


@dataclass(frozen=True)
class Event:
    """One event read from a document."""

    kind: EventKind
    name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    text: str = ""


def _replace_entity(match: re.Match[str]) -> str:
    name = match.group(1)
    if name is None:
        raise FeedError("unterminated entity reference")
    if name in _NAMED_ENTITIES:
        return _NAMED_ENTITIES[name]
    if name.startswith("#"):
        try:
            code = int(name[2:], 16) if name[1:2] == "x" else int(name[1:], 10)
            return chr(code)
        except (ValueError, OverflowError):
            pass
    raise FeedError(f"unrecognized entity reference: &{name};")


def _unescape(raw: str) -> str:
    if "&" not in raw:
        return raw
    return _ENTITY_RE.sub(_replace_entity, raw)


def _parse_attrs(raw: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for match in _ATTR_RE.finditer(raw):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attrs.setdefault(match.group(1), _unescape(value))
    return attrs


class XmlReader:
    """Reads events one at a time from an XML document."""

    def __init__(self, source: str | bytes):
        if isinstance(source, (bytes, bytearray)):
            try:
                source = bytes(source).decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise FeedError(f"input is not valid UTF-8: {exc}") from exc
        self._text = source.lstrip("\ufeff")
        self._pos = 0
        self._pending: deque[Event] = deque()
        self._open: list[str] = []

    def _locate(self, marker: str, start: int, what: str) -> int:
        index = self._text.find(marker, start)
        if index == -1:
            raise FeedError(f"unterminated {what}")
        return index

    def next_event(self) -> Event:
        """Return the next event; at the end of input, an EOF event every time."""
        if self._pending:
            return self._pending.popleft()
        text = self._text
        while self._pos < len(text):
            pos = self._pos
            if text[pos] != "<":
                end = text.find("<", pos)
                if end == -1:
                    end = len(text)
                self._pos = end
                raw = text[pos:end].strip(_WHITESPACE)
                if raw:
                    return Event(EventKind.TEXT, text=_unescape(raw))
                continue
            if text.startswith("<!--", pos):
                self._pos = self._locate("-->", pos + 4, "comment") + 3
                continue
            if text.startswith("<![CDATA[", pos):
                end = self._locate("]]>", pos + 9, "CDATA section")
                self._pos = end + 3
                return Event(EventKind.CDATA, text=text[pos + 9 : end])
            if text.startswith("<?", pos):
                self._pos = self._locate("?>", pos + 2, "processing instruction") + 2
                continue
            if text.startswith("<!", pos):
                match = _DECLARATION_RE.match(text, pos)
                if match is None:
                    raise FeedError("unterminated declaration")
                self._pos = match.end()
                continue
            if text.startswith("</", pos):
                end = self._locate(">", pos + 2, "end tag")
                name = text[pos + 2 : end].strip(_WHITESPACE)
                self._pos = end + 1
                if not self._open or self._open[-1] != name:
                    expected = self._open[-1] if self._open else "nothing"
                    raise FeedError(f"expected </{expected}>, found </{name}>")
                self._open.pop()
                return Event(EventKind.END, name=name)
            return self._read_start_tag(pos)
        return Event(EventKind.EOF)

    def _read_start_tag(self, pos: int) -> Event:
        match = _TAG_BODY_RE.match(self._text, pos + 1)
        if match is None:
            raise FeedError("unterminated start tag")
        self._pos = match.end()
        body = match.group(0)[:-1]
        self_closing = body.endswith("/")
        if self_closing:
            body = body[:-1]
        name_match = _NAME_RE.match(body)
        if name_match is None:
            raise FeedError("start tag without a name")
        name = name_match.group(0)
        attrs = _parse_attrs(body[name_match.end() :])
        if self_closing:
            self._pending.append(Event(EventKind.END, name=name))
        else:
            self._open.append(name)
        return Event(EventKind.START, name=name, attrs=attrs)

    def __iter__(self) -> Iterator[Event]:
        while (event := self.next_event()).kind is not EventKind.EOF:
            yield event


def skip(reader: XmlReader, name: str) -> None:
    """Consume events up to and including the end of the element ``name``."""
    depth = 0
    while True:
        event = reader.next_event()
        if event.kind is EventKind.START and event.name == name:
            depth += 1
        elif event.kind is EventKind.END and event.name == name:
            if depth == 0:
                return
            depth -= 1
        elif event.kind is EventKind.EOF:
            raise UnexpectedEof()


def element_text(reader: XmlReader) -> str | None:
    """Collect the text of the current element, skipping child elements.

    Returns ``None`` when the element holds no text.
    """
    parts: list[str] = []
    while True:
        event = reader.next_event()
        if event.kind is EventKind.START:
            skip(reader, event.name)
        elif event.kind in (EventKind.TEXT, EventKind.CDATA):
            parts.append(event.text)
        elif event.kind in (EventKind.END, EventKind.EOF):
            break
    content = "".join(parts)
    return content or None