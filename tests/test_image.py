import pytest

from rsskit.image import Image
from rsskit.xmlreader import UnexpectedEof, XmlReader
from rsskit.xmlwriter import XmlWriter


def _parse(document: str) -> Image:
    reader = XmlReader(document)
    start = reader.next_event()
    return Image.from_xml(reader, start.attrs)


def test_read_image():
    image = _parse(
        """
        <image>
            <title>Title</title>
            <url>http://example.org/url</url>
            <link>http://example.org/link</link>
            <width>100</width>
            <height>200</height>
            <description>Description</description>
        </image>
        """
    )
    assert image.title == "Title"
    assert image.url == "http://example.org/url"
    assert image.link == "http://example.org/link"
    assert image.width == "100"
    assert image.height == "200"
    assert image.description == "Description"


def test_read_rss091_image():
    image = _parse(
        "<image><title>WriteTheWeb</title>"
        "<url>http://writetheweb.com/images/mynetscape88.gif</url>"
        "<link>http://writetheweb.com</link><width>88</width><height>31</height>"
        "<description>News for web users that write back</description></image>"
    )
    assert image == Image(
        url="http://writetheweb.com/images/mynetscape88.gif",
        title="WriteTheWeb",
        link="http://writetheweb.com",
        width="88",
        height="31",
        description="News for web users that write back",
    )


def test_read_rss090_image_without_optional_fields():
    image = _parse(
        "<image><title>Mozilla</title><url>http://www.mozilla.org/images/moz.gif</url>"
        "<link>http://www.mozilla.org</link></image>"
    )
    assert image.title == "Mozilla"
    assert image.url == "http://www.mozilla.org/images/moz.gif"
    assert image.link == "http://www.mozilla.org"
    assert (image.width, image.height, image.description) == (None, None, None)


def test_empty_optional_field_reads_as_none():
    image = _parse("<image><width></width><url></url></image>")
    assert image.width is None
    assert image.url == ""


def test_unknown_elements_are_skipped():
    image = _parse("<image><foo><url>inner</url></foo><url>outer</url></image>")
    assert image.url == "outer"


def test_eof_inside_element_raises():
    with pytest.raises(UnexpectedEof):
        _parse("<image><url>http://example.com/a.png</url>")


def test_write_omits_missing_optional_fields():
    writer = XmlWriter()
    Image(url="http://example.com/a.png", title="A", link="http://example.com/").to_xml(writer)
    assert writer.getvalue() == (
        "<image><url>http://example.com/a.png</url><title>A</title>"
        "<link>http://example.com/</link></image>"
    )


def test_write_with_optional_fields_in_order():
    writer = XmlWriter()
    Image(
        url="u", title="t", link="l", width="120px", height="80px", description="d"
    ).to_xml(writer)
    assert writer.getvalue() == (
        "<image><url>u</url><title>t</title><link>l</link><width>120px</width>"
        "<height>80px</height><description>d</description></image>"
    )


def test_round_trip():
    original = Image(
        url="http://example.com/image.png?a=1&b=2",
        title="<logo>",
        link="http://example.com/",
        width="100",
        height="50",
        description="Logo & mark",
    )
    writer = XmlWriter()
    original.to_xml(writer)
    assert _parse(writer.getvalue()) == original