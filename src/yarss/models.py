from __future__ import annotations

import datetime
import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .exceptions import FieldMissing

logger = logging.getLogger(__name__)


class Dialect(enum.Enum):
    RSS = "rss"
    ATOM = "atom"
    RDF = "rdf"


@dataclass(frozen=True)
class Item:
    """A single entry of a feed, whatever dialect it came from."""

    id: str
    title: Optional[str] = None
    updated_at: Optional[datetime.datetime] = None
    link: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class Feed:
    """Result of a successful parse.

    ``dropped_items`` counts entries skipped because no id could be resolved.
    """

    title: str
    link: str
    dialect: Dialect
    description: str = ""
    items: tuple[Item, ...] = ()
    dropped_items: int = 0


@dataclass(frozen=True)
class ItemDraft:
    """Fields resolved for one item node before the id policy is applied."""

    id: Optional[str]
    title: Optional[str] = None
    updated_at: Optional[datetime.datetime] = None
    link: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None


def build_feed(
    dialect: Dialect,
    *,
    title: str,
    link: str,
    description: Optional[str],
    drafts: Iterable[ItemDraft],
    strict: bool = False,
) -> Feed:
    items: list[Item] = []
    dropped = 0
    for draft in drafts:
        if draft.id is None:
            if strict:
                raise FieldMissing("item.id", dialect)
            dropped += 1
            continue
        items.append(
            Item(
                id=draft.id,
                title=draft.title,
                updated_at=draft.updated_at,
                link=draft.link,
                author=draft.author,
                content=draft.content,
            )
        )

    if dropped:
        logger.warning(
            "Dropped %d %s item(s) without an identifier", dropped, dialect.value
        )

    return Feed(
        title=title,
        link=link,
        description=description or "",
        items=tuple(items),
        dialect=dialect,
        dropped_items=dropped,
    )
