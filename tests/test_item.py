import pytest

from rsskit.guid import Guid
from rsskit.item import Item
from rsskit.source import Source
from rsskit.xmlreader import UnexpectedEof, XmlReader
from rsskit.xmlwriter import XmlWriter


def parse_item(xml: str) -> Item:
    reader = XmlReader(xml)
    start = reader.next_event()
    assert start.name == "item"
    return Item.from_xml(reader, start.attrs)


def render(item: Item, indent_char=None, indent_size=0) -> str:
    writer = XmlWriter(indent_char, indent_size)
    item.to_xml(writer)
    return writer.getvalue()


ITEM_XML = """
<item>
    <title>Title</title>
    <link>http://example.com/</link>
    <description>Description</description>
    <author>author@example.com</author>
    <comments>Comments</comments>
    <pubDate>Sat, 27 Aug 2016 00:00:00 GMT</pubDate>
</item>
"""


def test_read_item():
    item = parse_item(ITEM_XML)
    assert item.title == "Title"
    assert item.link == "http://example.com/"
    assert item.description == "Description"
    assert item.author == "author@example.com"
    assert item.comments == "Comments"
    assert item.pub_date == "Sat, 27 Aug 2016 00:00:00 GMT"


def test_read_content():
    item = parse_item(
        '<item><content:encoded><![CDATA[An example <a href="http://example.com/">'
        "link</a>.]]></content:encoded></item>"
    )
    assert item.content == 'An example <a href="http://example.com/">link</a>.'


def test_read_source():
    item = parse_item('<item><source url="http://example.com/feed/">Feed</source></item>')
    assert item.source == Source(url="http://example.com/feed/", title="Feed")


@pytest.mark.parametrize(
    "xml, value, permalink",
    [
        ('<item><guid isPermaLink="false">abc</guid></item>', "abc", False),
        ("<item><guid>def?g=h&amp;i=j</guid></item>", "def?g=h&i=j", True),
    ],
)
def test_read_guid(xml, value, permalink):
    item = parse_item(xml)
    assert item.guid == Guid(value=value, permalink=permalink)


def test_read_multiple_links():
    item = parse_item(
        """
        <item>
            <link href="https://example.com/rss/?outputType=xml" rel="self" type="application/atom+xml"/>
            <link>https://example.com/policy/?utm_medium=referral&amp;utm_source=rss</link>
            <link href="https://hub.example.com/" rel="hub"/>
        </item>
        """
    )
    assert item.link == "https://example.com/policy/?utm_medium=referral&utm_source=rss"


def test_unknown_elements_are_skipped():
    item = parse_item("<item><foo><title>Inner</title></foo><title>Outer</title></item>")
    assert item.title == "Outer"


def test_unterminated_item_raises():
    with pytest.raises(UnexpectedEof):
        parse_item("<item><title>x</title>")


def test_write_link_pretty():
    item = Item(link="http://example.com/post1")
    assert render(item, " ", 4) == (
        "<item>\n    <link>http://example.com/post1</link>\n</item>"
    )


def test_write_order_and_cdata():
    item = Item(
        title="T",
        description="D",
        guid=Guid(value="g", permalink=False),
        content="C",
    )
    assert render(item) == (
        "<item><title>T</title><description><![CDATA[D]]></description>"
        '<guid isPermaLink="false">g</guid>'
        "<content:encoded><![CDATA[C]]></content:encoded></item>"
    )


def test_write_escapes_source():
    item = Item(
        source=Source(url="http://example.com?test=2&another=false", title="<title>"),
    )
    xml = render(item)
    assert "http://example.com?test=2&amp;another=false" in xml
    assert "&lt;title&gt;" in xml
    parsed = parse_item(xml)
    assert parsed.source.url == "http://example.com?test=2&another=false"
    assert parsed.source.title == "<title>"


def test_round_trip():
    item = parse_item(ITEM_XML)
    item.guid = Guid(value="51ed8fb6-e7db-4b1d-a75a-0d1621e895b4")
    item.source = Source(url="http://example.com/feed/", title="Feed")
    item.content = "Lorem ipsum dolor sit amet"
    assert parse_item(render(item)) == item


def test_used_namespaces_with_content():
    item = Item(content="Lorem ipsum dolor sit amet")
    assert item.used_namespaces() == {
        "content": "http://purl.org/rss/1.0/modules/content/"
    }


def test_used_namespaces_without_content():
    assert Item(title="x").used_namespaces() == {}