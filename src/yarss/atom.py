"""Atom 1.0 (and the 0.3 date names): root ``<feed>`` holding ``<entry>`` nodes."""

from __future__ import annotations

from typing import Optional

from .dates import parse_date
from .exceptions import FieldMissing
from .models import Dialect, Feed, ItemDraft, build_feed
from .resolver import (
    child_full_text,
    child_markup,
    child_text,
    require,
    resolve,
    resolve_all,
)
from .tree import Node

# Plain text first; ``type="xhtml"`` titles keep their text inside a <div>.
FEED_TITLE = (child_text("title"), child_full_text("title"))
FEED_DESCRIPTION = (child_text("subtitle"),)

ITEM_ID = (child_text("id"),)
ITEM_TITLE = (child_text("title"), child_full_text("title"))
ITEM_UPDATED = (
    child_text("updated"),
    child_text("published"),
    child_text("modified"),
    child_text("issued"),
)
ITEM_AUTHOR = (child_text("author/name"),)
ITEM_CONTENT = (child_markup("content"), child_markup("summary"))


def _link(node: Node) -> Optional[str]:
    """Pick the ``rel="alternate"`` link (no ``rel`` means alternate), else the first."""
    first: Optional[str] = None
    for link in resolve_all(node, "link"):
        href = (link.attributes.get("href") or "").strip()
        if not href:
            continue
        if link.attributes.get("rel", "alternate") == "alternate":
            return href
        if first is None:
            first = href
    return first


def _parse_entry(entry: Node) -> ItemDraft:
    return ItemDraft(
        id=resolve(entry, ITEM_ID),
        title=resolve(entry, ITEM_TITLE),
        updated_at=parse_date(resolve(entry, ITEM_UPDATED)),
        link=_link(entry),
        author=resolve(entry, ITEM_AUTHOR),
        content=resolve(entry, ITEM_CONTENT),
    )


def extract(root: Node, *, strict: bool = False) -> Feed:
    title = require(root, FEED_TITLE, "title", Dialect.ATOM)
    link = _link(root)
    if link is None:
        raise FieldMissing("link", Dialect.ATOM)

    return build_feed(
        Dialect.ATOM,
        title=title,
        link=link,
        description=resolve(root, FEED_DESCRIPTION),
        drafts=(_parse_entry(entry) for entry in root.findall("entry")),
        strict=strict,
    )
