"""Checks of feed objects against the RSS specification."""

from __future__ import annotations

import re
from datetime import datetime
from functools import singledispatch
from typing import TypeVar

from rsskit.image import Image
from rsskit.item import Item
from rsskit.source import Source
from rsskit.textinput import TextInput

__all__ = ["ValidationError", "validate"]

T = TypeVar("T")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

_SCHEME_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):(.*)", re.DOTALL)
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_FORBIDDEN_HOST_CHARS = frozenset(" \x00#<>?@[\\]^|%")

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
_ZONE_NAMES = frozenset({"ut", "gmt", "est", "edt", "cst", "cdt", "mst", "mdt", "pst", "pdt"})
_RFC2822_RE = re.compile(
    r"""
    \s*(?:(?P<wday>[A-Za-z]{3})\s*,\s*)?
    (?P<day>[0-9]{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>[0-9]{2,4})\s+
    (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?\s+
    (?P<zone>[+-][0-9]{4}|[A-Za-z]{1,3})\s*
    """,
    re.VERBOSE,
)

_VALID_WIDTH = range(0, 145)


class ValidationError(ValueError):
    """Raised when a feed object does not meet the RSS specification.

    ``kind`` tells what failed: one of ``DATE``, ``INT``, ``URL``, ``MIME``
    or ``OTHER``.
    """

    DATE = "date"
    INT = "int"
    URL = "url"
    MIME = "mime"
    OTHER = "validation"

    def __init__(self, message: str, kind: str = OTHER):
        super().__init__(message)
        self.kind = kind


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def _parse_int(text: str) -> int:
    if not text:
        raise ValidationError("cannot parse integer from empty string", ValidationError.INT)
    if not _INT_RE.fullmatch(text):
        raise ValidationError("invalid digit found in string", ValidationError.INT)
    value = int(text)
    if value > _I64_MAX:
        raise ValidationError("number too large to fit in target type", ValidationError.INT)
    if value < _I64_MIN:
        raise ValidationError("number too small to fit in target type", ValidationError.INT)
    return value


def _url_error(message: str) -> ValidationError:
    return ValidationError(message, ValidationError.URL)


def _check_authority(authority: str, require_host: bool) -> None:
    host_port = authority.rpartition("@")[2]
    if host_port.startswith("["):
        close = host_port.find("]")
        if close == -1:
            raise _url_error("invalid IPv6 address")
        host, rest = host_port[: close + 1], host_port[close + 1 :]
        if rest and not rest.startswith(":"):
            raise _url_error("invalid port number")
        port = rest[1:] if rest else None
    else:
        host, sep, port_text = host_port.partition(":")
        port = port_text if sep else None
    if port:
        if not port.isascii() or not port.isdigit() or int(port) > 65535:
            raise _url_error("invalid port number")
    elif port is not None and require_host and not host:
        raise _url_error("empty host")
    if require_host and not host:
        raise _url_error("empty host")
    if not host.startswith("[") and any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
        raise _url_error("invalid domain character")


def _parse_url(text: str) -> None:
    cleaned = text.strip("".join(chr(code) for code in range(0x21)))
    cleaned = cleaned.replace("\t", "").replace("\n", "").replace("\r", "")
    match = _SCHEME_RE.fullmatch(cleaned)
    if match is None:
        raise _url_error("relative URL without a base")
    scheme, rest = match.group(1).lower(), match.group(2)
    if scheme in _SPECIAL_SCHEMES:
        authority = re.split(r"[/\\?#]", rest.lstrip("/\\"), maxsplit=1)[0]
        _check_authority(authority, require_host=True)
    elif scheme != "file" and rest.startswith("//"):
        authority = re.split(r"[/?#]", rest[2:], maxsplit=1)[0]
        _check_authority(authority, require_host=False)


def _date_error(message: str) -> ValidationError:
    return ValidationError(message, ValidationError.DATE)


def _parse_rfc2822(text: str) -> datetime:
    match = _RFC2822_RE.fullmatch(text)
    if match is None:
        raise _date_error("input contains invalid characters")
    month_name = match.group("month").lower()
    if month_name not in _MONTHS:
        raise _date_error("input contains invalid characters")
    zone = match.group("zone")
    if zone[0] in "+-":
        if int(zone[3:]) >= 60:
            raise _date_error("input is out of range")
    else:
        lowered = zone.lower()
        if lowered not in _ZONE_NAMES and not (len(lowered) == 1 and lowered != "j"):
            raise _date_error("input contains invalid characters")
    year_text = match.group("year")
    year = int(year_text)
    if len(year_text) == 2:
        year += 2000 if year < 50 else 1900
    elif len(year_text) == 3:
        year += 1900
    second = int(match.group("second") or 0)
    if second > 60:
        raise _date_error("input is out of range")
    try:
        moment = datetime(
            year,
            _MONTHS.index(month_name) + 1,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            min(second, 59),
        )
    except ValueError as exc:
        raise _date_error("input is out of range") from exc
    weekday = match.group("wday")
    if weekday is not None:
        lowered = weekday.lower()
        if lowered not in _WEEKDAYS:
            raise _date_error("input contains invalid characters")
        if _WEEKDAYS.index(lowered) != moment.weekday():
            raise _date_error("no possible date and time matching input")
    return moment


@singledispatch
def validate(value: T) -> T:
    """Check ``value`` against the RSS specification and return it unchanged.

    Raises ValidationError on the first problem found.
    """
    raise TypeError(f"cannot validate objects of type {type(value).__name__}")


@validate.register
def _validate_text_input(value: TextInput) -> TextInput:
    _parse_url(value.link)
    return value


@validate.register
def _validate_image(value: Image) -> Image:
    _parse_url(value.link)
    _parse_url(value.url)
    if value.width is not None:
        _require(
            _parse_int(value.width) in _VALID_WIDTH,
            "Image width is not between 0 and 144",
        )
    if value.height is not None:
        _require(
            _parse_int(value.height) in _VALID_WIDTH,
            "Image height is not between 0 and 144",
        )
    return value


@validate.register
def _validate_source(value: Source) -> Source:
    _parse_url(value.url)
    return value


@validate.register
def _validate_item(value: Item) -> Item:
    if value.link is not None:
        _parse_url(value.link)
    if value.comments is not None:
        _parse_url(value.comments)
    if value.pub_date is not None:
        _parse_rfc2822(value.pub_date)
    if value.source is not None:
        validate(value.source)
    return value