# rsskit

Read, write and validate RSS feed elements with nothing beyond the Python standard library.

## Installation

```
pip install rsskit
```

## What it provides

- `rsskit.xmlreader`: a small pull reader for XML. `XmlReader` takes a `str` or UTF-8 `bytes`
  and hands out `Event` values (kinds in `EventKind`: `START`, `END`, `TEXT`, `CDATA`, `EOF`)
  through `next_event()` or by iteration. Qualified names are kept as written
  (`content:encoded`), self-closing elements become a start and an end event, text is trimmed
  and whitespace-only text is dropped. Comments, processing instructions and declarations are
  skipped. The helpers `element_text` (text of the current element, or `None` when it has none)
  and `skip` (consume up to the end of an element) build on it. Malformed input, mismatched end
  tags and unknown entity references raise `FeedError`; input that stops in the middle of an
  element raises `UnexpectedEof`.
- `rsskit.xmlwriter`: `XmlWriter` builds XML text, compact by default or indented when given an
  indent character and size. `getvalue()` returns what has been written. The `ToXml` base class
  is for objects that can write themselves, and can report the namespaces they need through
  `used_namespaces()`.
- `rsskit.guid.Guid`, `rsskit.source.Source`, `rsskit.textinput.TextInput`,
  `rsskit.image.Image`, `rsskit.item.Item`: RSS elements as dataclasses. Each has a `from_xml`
  class method that reads the element whose start tag was just consumed, and a `to_xml` method.
- `rsskit.validation`: `validate` checks a `TextInput`, `Image`, `Source` or `Item` against the
  RSS specification (URLs, RFC 2822 dates, image width and height between 0 and 144) and
  returns it unchanged, or raises `ValidationError`, whose `kind` tells what failed. Any other
  type raises `TypeError`.

## Reading

```python
from rsskit.xmlreader import XmlReader, EventKind
from rsskit.item import Item

xml = """<item>
  <title>Hello</title>
  <link>http://example.com/hello</link>
  <guid isPermaLink="false">abc</guid>
</item>"""

reader = XmlReader(xml)
for event in reader:
    if event.kind is EventKind.START and event.name == "item":
        item = Item.from_xml(reader, event.attrs)
        break

print(item.title)            # Hello
print(item.guid.value)       # abc
print(item.guid.permalink)   # False
```

A `<link>` element without text does not replace a link already read.

## Writing

```python
from rsskit.xmlwriter import XmlWriter
from rsskit.item import Item
from rsskit.guid import Guid

item = Item(title="Hello", link="http://example.com/hello", guid=Guid(value="abc"))

writer = XmlWriter(" ", 4)
item.to_xml(writer)
print(writer.getvalue())
```

Text and attribute values are escaped when written. An item's description and its
`content:encoded` body are written as CDATA sections. `Item.used_namespaces()` returns the
`content` namespace when the item has content, and nothing otherwise.

## Validation

```python
from rsskit.validation import validate, ValidationError
from rsskit.image import Image

try:
    validate(Image(url="http://example.com/a.png", link="http://example.com/", width="200"))
except ValidationError as err:
    print(err)   # Image width is not between 0 and 144
```

## What it does not do

- There is no channel or whole-feed type: the package reads and writes single elements, and
  does not parse or produce an `<rss>` document with its `<channel>` on its own.
- Categories, enclosures and namespaced extensions (such as iTunes or Dublin Core elements)
  are not modelled; `Item.from_xml` skips them.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```