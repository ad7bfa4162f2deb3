"""Sample documents shared by the parser tests."""

import pytest


SAMPLE_RSS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>  Foo's bars  </title>
    <link>http://foo.bar/</link>
    <atom:link href="http://foo.bar/feed.xml" rel="self" type="application/rss+xml"/>
    <description>Bars everywhere!</description>
    <item>
      <title>First Article</title>
      <link>https://foo.bar/article-1</link>
      <guid isPermaLink="false">article-1</guid>
      <description>Description of the first article</description>
      <content:encoded><![CDATA[<p>Hi!</p>]]></content:encoded>
      <author>joe@foo.bar (Joe)</author>
      <pubDate>Thu, 13 Feb 2026 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Second Article</title>
      <link>https://foo.bar/article-2</link>
      <description>Description of the second article</description>
      <dc:creator>Jane</dc:creator>
      <dc:date>2026-02-13T09:00:00Z</dc:date>
    </item>
    <item>
      <title>Third Article</title>
      <guid>article-3</guid>
      <pubDate>sometime last week</pubDate>
    </item>
  </channel>
</rss>"""

SAMPLE_ATOM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="text">Test Atom Feed</title>
  <subtitle>A test Atom feed</subtitle>
  <link rel="self" href="https://example.com/feed.atom"/>
  <link rel="alternate" type="text/html" href="https://example.com/"/>
  <id>urn:uuid:feed</id>
  <updated>2026-02-13T10:00:00Z</updated>
  <entry>
    <title>Atom Entry 1</title>
    <link rel="edit" href="https://example.com/edit/1"/>
    <link href="https://example.com/entry-1"/>
    <id>urn:uuid:entry-1</id>
    <updated>2026-02-13T10:00:00Z</updated>
    <author><name>John Doe</name></author>
    <content type="html">&lt;p&gt;Some text.&lt;/p&gt;</content>
  </entry>
  <entry>
    <title>Atom Entry 2</title>
    <link rel="alternate" href="https://example.com/entry-2"/>
    <id>urn:uuid:entry-2</id>
    <published>2026-02-12T08:00:00+02:00</published>
    <summary>Summary of entry 2</summary>
  </entry>
  <entry>
    <title>Atom Entry 3</title>
    <id>urn:uuid:entry-3</id>
    <content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml"><p>Hi!</p></div></content>
  </entry>
</feed>"""

SAMPLE_RDF_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF
    xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns="http://purl.org/rss/1.0/">
  <channel rdf:about="http://example.org/rss.rdf">
    <title>RDF Feed</title>
    <link>http://example.org/</link>
    <description>An RSS 1.0 feed</description>
    <items>
      <rdf:Seq>
        <rdf:li rdf:resource="http://example.org/1"/>
        <rdf:li rdf:resource="http://example.org/2"/>
        <rdf:li rdf:resource="http://example.org/3"/>
      </rdf:Seq>
    </items>
  </channel>
  <item rdf:about="http://example.org/1">
    <title>First</title>
    <link>http://example.org/1.html</link>
    <dc:date>2024-01-15T10:30:00+02:00</dc:date>
    <dc:creator>Jane</dc:creator>
    <description>First summary</description>
  </item>
  <item rdf:about="http://example.org/2">
    <title>Second</title>
    <link>http://example.org/2.html</link>
    <content:encoded><![CDATA[<p>Second body</p>]]></content:encoded>
    <description>Second summary</description>
  </item>
  <item>
    <title>Third</title>
    <link>http://example.org/3.html</link>
  </item>
</rdf:RDF>"""

SAMPLE_MALFORMED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Malformed Feed</title>
    <link>https://example.com</link>
    <item>
      <title>Bad Item</title>
      <!-- Missing closing tags intentionally -->
"""

SAMPLE_NOT_A_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<html>
  <body>This is not a feed</body>
</html>"""


@pytest.fixture
def sample_rss_xml():
    return SAMPLE_RSS_XML


@pytest.fixture
def sample_atom_xml():
    return SAMPLE_ATOM_XML


@pytest.fixture
def sample_rdf_xml():
    return SAMPLE_RDF_XML


@pytest.fixture
def sample_malformed_xml():
    return SAMPLE_MALFORMED_XML


@pytest.fixture
def sample_not_a_feed_xml():
    return SAMPLE_NOT_A_FEED_XML
