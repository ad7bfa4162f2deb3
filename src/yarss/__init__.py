from .exceptions import FeedError, FieldMissing, MalformedDocument, UnknownDialect
from .main import classify, parse, parse_file, parse_stream, parse_string
from .models import Dialect, Feed, Item

__all__ = [
    "Dialect",
    "Feed",
    "FeedError",
    "FieldMissing",
    "Item",
    "MalformedDocument",
    "UnknownDialect",
    "classify",
    "parse",
    "parse_file",
    "parse_stream",
    "parse_string",
]
