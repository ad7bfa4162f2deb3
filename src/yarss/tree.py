"""Generic element tree consumed by the extractors.

Wraps :mod:`lxml.etree` elements so that names read the way they are written
in the document (``rdf:RDF``, ``dc:creator``) instead of Clark notation.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING, Optional

from lxml import etree

from .exceptions import MalformedDocument

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger(__name__)

_XML_NS = "http://www.w3.org/XML/1998/namespace"


def _qualified_name(element: _Element) -> str:
    tag = element.tag
    # Undeclared prefixes survive recovery parsing as literal "prefix:local".
    if not tag.startswith("{"):
        return tag
    local = tag.split("}", 1)[1]
    prefix = element.prefix
    return f"{prefix}:{local}" if prefix else local


def _qualified_attribute(element: _Element, name: str) -> str:
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    if uri == _XML_NS:
        return f"xml:{local}"
    for prefix, ns in element.nsmap.items():
        if prefix and ns == uri:
            return f"{prefix}:{local}"
    return local


class Node:
    """One element of a parsed document."""

    def __init__(self, element: _Element) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"<Node {self.name}>"

    @cached_property
    def name(self) -> str:
        return _qualified_name(self._element)

    @cached_property
    def attributes(self) -> dict[str, str]:
        return {
            _qualified_attribute(self._element, key): str(value)
            for key, value in self._element.attrib.items()
        }

    @cached_property
    def text(self) -> str:
        """Direct text only; text nested inside child elements is ignored."""
        parts = [self._element.text or ""]
        for child in self._element:
            parts.append(child.tail or "")
        return "".join(parts)

    @cached_property
    def full_text(self) -> str:
        """Every descendant text node joined, markup and comments dropped."""
        return str(self._element.xpath("string()"))

    @cached_property
    def children(self) -> tuple[Node, ...]:
        return tuple(
            Node(child) for child in self._element if isinstance(child.tag, str)
        )

    @cached_property
    def markup(self) -> str:
        """Raw inner markup: direct text plus serialized child elements."""
        parts = [self._element.text or ""]
        for child in self._element:
            if isinstance(child.tag, str):
                parts.append(
                    etree.tostring(child, encoding="unicode", with_tail=True)
                )
            else:
                parts.append(child.tail or "")
        return "".join(parts)

    def find(self, name: str) -> Optional[Node]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def findall(self, name: str) -> list[Node]:
        return [child for child in self.children if child.name == name]


def _xml_parser(recover: bool) -> etree.XMLParser:
    # A fresh parser per call keeps each call's error_log to itself.
    return etree.XMLParser(
        ns_clean=True,
        recover=recover,
        collect_ids=False,
        resolve_entities=False,
    )


def _only_namespace_errors(parser: etree.XMLParser) -> bool:
    entries = list(parser.error_log.filter_from_errors())
    return bool(entries) and all(
        entry.domain == etree.ErrorDomains.NAMESPACE for entry in entries
    )


def build_tree(data: bytes, source: Optional[object] = None) -> Node:
    """Parse ``data`` and return its root node.

    Raises:
        MalformedDocument: If the bytes are not well-formed XML
    """
    strict_parser = _xml_parser(recover=False)
    try:
        root = etree.fromstring(data, parser=strict_parser)
    except etree.XMLSyntaxError as e:
        if not _only_namespace_errors(strict_parser):
            raise MalformedDocument(
                f"Failed to parse XML content: {e}", source
            ) from e
        logger.debug("Re-parsing with undeclared namespace prefixes: %s", e)
        try:
            root = etree.fromstring(data, parser=_xml_parser(recover=True))
        except etree.XMLSyntaxError as e2:
            raise MalformedDocument(
                f"Failed to parse XML content: {e2}", source
            ) from e2

    if root is None:
        raise MalformedDocument("Failed to parse XML: received empty content", source)
    return Node(root)
