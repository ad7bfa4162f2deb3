"""RSS 2.0: ``<rss><channel>`` holding metadata and nested ``<item>`` nodes."""

from __future__ import annotations

from .dates import parse_date
from .exceptions import FieldMissing
from .models import Dialect, Feed, ItemDraft, build_feed
from .resolver import child_markup, child_text, require, resolve
from .tree import Node

FEED_TITLE = (child_text("title"),)
FEED_LINK = (child_text("link"),)
FEED_DESCRIPTION = (child_text("description"),)

ITEM_ID = (child_text("guid"), child_text("link"))
ITEM_TITLE = (child_text("title"),)
ITEM_LINK = (child_text("link"),)
ITEM_UPDATED = (child_text("pubDate"), child_text("dc:date"))
ITEM_AUTHOR = (child_text("author"), child_text("dc:creator"))
ITEM_CONTENT = (child_markup("content:encoded"), child_markup("description"))


def _parse_item(item: Node) -> ItemDraft:
    return ItemDraft(
        id=resolve(item, ITEM_ID),
        title=resolve(item, ITEM_TITLE),
        updated_at=parse_date(resolve(item, ITEM_UPDATED)),
        link=resolve(item, ITEM_LINK),
        author=resolve(item, ITEM_AUTHOR),
        content=resolve(item, ITEM_CONTENT),
    )


def extract(root: Node, *, strict: bool = False) -> Feed:
    channel = root.find("channel")
    if channel is None:
        raise FieldMissing("channel", Dialect.RSS)

    return build_feed(
        Dialect.RSS,
        title=require(channel, FEED_TITLE, "title", Dialect.RSS),
        link=require(channel, FEED_LINK, "link", Dialect.RSS),
        description=resolve(channel, FEED_DESCRIPTION),
        drafts=(_parse_item(item) for item in channel.findall("item")),
        strict=strict,
    )
