from __future__ import annotations

import logging
import os
import re
from typing import IO, Any, Callable, Optional, Union

from . import atom, rdf, rss
from .exceptions import MalformedDocument, UnknownDialect
from .models import Dialect, Feed
from .tree import Node, build_tree

logger = logging.getLogger(__name__)

_Source = Union[str, bytes]

_RE_XML_DECL_ENCODING = re.compile(
    r'(<\?xml[^>]*encoding=["\'])([^"\']+)(["\'][^>]*\?>)', re.IGNORECASE
)

_EXTRACTORS: dict[Dialect, Callable[..., Feed]] = {
    Dialect.RSS: rss.extract,
    Dialect.ATOM: atom.extract,
    Dialect.RDF: rdf.extract,
}

_NON_FEED_MESSAGES: dict[str, str] = {
    "html": "Received HTML page instead of feed",
    "body": "Received HTML fragment instead of feed",
    "opml": "Received OPML document instead of feed (OPML is an outline format, not a feed)",
    "urlset": "Received XML sitemap instead of feed",
    "sitemapindex": "Received XML sitemap instead of feed",
}


def _ensure_utf8_xml_declaration(content: str) -> str:
    """Ensure the XML declaration's encoding matches the UTF-8 bytes we emit."""
    if not content.lstrip().startswith("<?xml"):
        return content
    return _RE_XML_DECL_ENCODING.sub(r"\1utf-8\3", content, count=1)


def _prepare_xml_bytes(
    xml_content: _Source, source: Optional[Any] = None
) -> bytes:
    if isinstance(xml_content, str):
        xml_content = _ensure_utf8_xml_declaration(xml_content).encode(
            "utf-8", errors="replace"
        )

    cleaned = xml_content.lstrip()
    if cleaned.startswith(b"\xef\xbb\xbf"):
        cleaned = cleaned[3:].lstrip()
    if not cleaned:
        raise MalformedDocument("Empty content", source)

    # LINE SEPARATOR and PARAGRAPH SEPARATOR make libxml2 reject the document.
    if b"\xe2\x80\xa8" in cleaned or b"\xe2\x80\xa9" in cleaned:
        cleaned = cleaned.replace(b"\xe2\x80\xa8", b"\n").replace(
            b"\xe2\x80\xa9", b"\n"
        )
    return cleaned


def classify(root: Node, source: Optional[Any] = None) -> Dialect:
    """Decide which grammar applies to the document rooted at ``root``.

    The three grammars never share a root name, so the order below only
    makes the decision deterministic.
    """
    name = root.name
    if name == "rss":
        return Dialect.RSS
    if name == "feed":
        return Dialect.ATOM
    if name in ("rdf:RDF", "RDF"):
        return Dialect.RDF

    local = name.rsplit(":", 1)[-1].lower()
    raise UnknownDialect(name, source, hint=_NON_FEED_MESSAGES.get(local))


def parse_string(
    data: _Source, source: Optional[Any] = None, *, strict: bool = False
) -> Feed:
    """Parse a feed out of raw RSS, RDF or Atom XML.

    Args:
        data: XML document as text or bytes
        source: Path or stream name, only used in error messages
        strict: Fail on items without an identifier instead of dropping them

    Returns:
        Feed with its items in document order

    Raises:
        MalformedDocument: If the content is empty or not well-formed XML
        UnknownDialect: If the root element is not rss, feed or rdf:RDF
        FieldMissing: If a required field cannot be resolved
    """
    root = build_tree(_prepare_xml_bytes(data, source), source)
    dialect = classify(root, source)
    logger.debug("Parsing %s as %s", source or "<string>", dialect.value)
    return _EXTRACTORS[dialect](root, strict=strict)


def parse_stream(stream: IO[Any], *, strict: bool = False) -> Feed:
    """Read ``stream`` to completion and parse it; its name is kept for errors."""
    data = stream.read()
    return parse_string(data, getattr(stream, "name", None), strict=strict)


def parse_file(path: Union[str, os.PathLike], *, strict: bool = False) -> Feed:
    with open(path, "rb") as f:
        data = f.read()
    return parse_string(data, os.fspath(path), strict=strict)


def parse(
    source: Union[_Source, os.PathLike, IO[Any]], *, strict: bool = False
) -> Feed:
    """Parse a feed from XML content, a path-like object or a readable stream.

    ``str`` and ``bytes`` are always treated as document text; pass paths as
    :class:`os.PathLike` or use :func:`parse_file`.
    """
    if hasattr(source, "read"):
        return parse_stream(source, strict=strict)  # type: ignore[arg-type]
    if isinstance(source, os.PathLike):
        return parse_file(source, strict=strict)
    return parse_string(source, strict=strict)
