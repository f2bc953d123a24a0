"""Test configuration and fixtures."""

import pytest
import structlog
from lxml import etree


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration bound to a test's captured streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_doc():
    """Build an lxml element tree from XML text."""

    def _make(xml: str) -> etree._ElementTree:
        return etree.fromstring(xml.encode("utf-8")).getroottree()

    return _make


@pytest.fixture
def sample_rss_content():
    """Sample RSS 2.0 feed with three items."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example Blog</title>
    <link>https://blog.example.com/</link>
    <description>Posts from the example blog</description>
    <item>
      <title>First post</title>
      <link>https://blog.example.com/posts/1</link>
      <description>The first post.</description>
    </item>
    <item>
      <media:title>Media title</media:title>
      <title>Second post</title>
      <link>https://blog.example.com/posts/2</link>
      <description><![CDATA[Second <b>bold</b> post]]></description>
    </item>
    <item>
      <title>Third post</title>
      <link>/posts/3</link>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def sample_atom_content():
    """Sample Atom feed with two entries."""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <link rel="self" href="https://atom.example.com/feed.xml"/>
  <entry>
    <title>Entry one</title>
    <link rel="self" href="https://atom.example.com/entries/1.xml"/>
    <link rel="alternate" type="text/html" href="https://atom.example.com/entries/1"/>
    <summary>Summary of entry one</summary>
  </entry>
  <entry>
    <title>Entry two</title>
    <link rel="alternate" href="https://atom.example.com/entries/2"/>
    <summary/>
  </entry>
</feed>"""


@pytest.fixture
def sample_rdf_content():
    """Sample RDF / RSS 1.0 feed with two list items."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/">
  <channel rdf:about="https://rdf.example.com/">
    <title>Example RDF</title>
    <link>https://rdf.example.com/</link>
    <items>
      <rdf:Seq>
        <rdf:li rdf:resource="https://rdf.example.com/a"/>
        <rdf:li rdf:resource="https://rdf.example.com/b"/>
      </rdf:Seq>
    </items>
  </channel>
  <item rdf:about="https://rdf.example.com/a">
    <title>Item A</title>
    <link>https://rdf.example.com/a</link>
  </item>
  <item rdf:about="https://rdf.example.com/b">
    <title>Item B</title>
    <link>https://rdf.example.com/b</link>
  </item>
</rdf:RDF>"""
