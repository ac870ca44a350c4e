"""XML output for feed objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

__all__ = ["ToXml", "XmlWriter"]

_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&apos;", '"': "&quot;"}
)


def _escape(value: str) -> str:
    return value.translate(_ESCAPES)


class ToXml(ABC):
    """An object that can write itself as XML."""

    @abstractmethod
    def to_xml(self, writer: "XmlWriter") -> None:
        """Write this object to ``writer``."""

    def used_namespaces(self) -> dict[str, str]:
        """Return the namespace prefixes this object needs, mapped to their URIs."""
        return {}


class XmlWriter:
    """Builds an XML document as a string, optionally indented."""

    def __init__(self, indent_char: str | None = None, indent_size: int = 0):
        self._parts: list[str] = []
        self._pretty = indent_char is not None
        self._unit = (indent_char or "") * indent_size
        self._depth = 0
        self._line_break = False

    def _write_indent(self) -> None:
        if self._pretty and self._line_break:
            self._parts.append("\n" + self._unit * self._depth)

    @staticmethod
    def _tag(name: str, attrs: Mapping[str, str] | None) -> str:
        rendered = "".join(
            f' {key}="{_escape(value)}"' for key, value in (attrs or {}).items()
        )
        return name + rendered

    def start(self, name: str, attrs: Mapping[str, str] | None = None) -> None:
        """Open an element."""
        self._write_indent()
        self._parts.append(f"<{self._tag(name, attrs)}>")
        self._depth += 1
        self._line_break = True

    def end(self, name: str) -> None:
        """Close an element."""
        self._depth = max(self._depth - 1, 0)
        self._write_indent()
        self._parts.append(f"</{name}>")
        self._line_break = True

    def empty(self, name: str, attrs: Mapping[str, str] | None = None) -> None:
        """Write a self-closing element."""
        self._write_indent()
        self._parts.append(f"<{self._tag(name, attrs)}/>")
        self._line_break = True

    def text(self, value: str) -> None:
        """Write escaped character data."""
        self._parts.append(_escape(value))
        self._line_break = False

    def cdata(self, value: str) -> None:
        """Write a CDATA section, splitting it wherever the content holds ``]]>``."""
        body = value.replace("]]>", "]]]]><![CDATA[>")
        self._parts.append(f"<![CDATA[{body}]]>")
        self._line_break = False

    def write_text_element(self, name: str, text: str) -> None:
        """Write ``<name>text</name>``."""
        self.start(name)
        self.text(text)
        self.end(name)

    def write_text_elements(self, name: str, values: Iterable[str]) -> None:
        """Write one text element named ``name`` per value."""
        for value in values:
            self.write_text_element(name, value)

    def write_cdata_element(self, name: str, text: str) -> None:
        """Write ``<name><![CDATA[text]]></name>``."""
        self.start(name)
        self.cdata(text)
        self.end(name)

    def write_object(self, obj: ToXml) -> None:
        """Let ``obj`` write itself."""
        obj.to_xml(self)

    def write_objects(self, objects: Iterable[ToXml]) -> None:
        """Let each object write itself, in order."""
        for obj in objects:
            obj.to_xml(self)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)