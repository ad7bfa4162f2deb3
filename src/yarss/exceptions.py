from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models import Dialect


class FeedError(ValueError):
    """Base class for every failure raised while parsing a feed."""


class MalformedDocument(FeedError):
    """The input could not be parsed as XML at all."""

    def __init__(self, message: str, source: Optional[Any] = None) -> None:
        if source is not None:
            message = f"{message} ({source})"
        super().__init__(message)
        self.source = source


class UnknownDialect(FeedError):
    """The root element is not ``rss``, ``feed`` or ``rdf:RDF``."""

    def __init__(
        self, root: str, source: Optional[Any] = None, hint: Optional[str] = None
    ) -> None:
        message = hint or f"Unknown feed type: {root}"
        if source is not None:
            message = f"{message} ({source})"
        super().__init__(message)
        self.root = root
        self.source = source


class FieldMissing(FeedError):
    """A required field could not be resolved by any candidate."""

    def __init__(self, field: str, dialect: Dialect) -> None:
        super().__init__(f"Invalid {dialect.value} feed: missing {field}")
        self.field = field
        self.dialect = dialect
