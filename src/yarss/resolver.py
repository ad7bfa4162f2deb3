"""Ordered candidate lookups shared by every dialect extractor."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from .exceptions import FieldMissing
from .models import Dialect
from .tree import Node

TEXT = "text"
ATTRIBUTE = "attribute"
MARKUP = "markup"
FULL_TEXT = "full_text"
OWN_ATTRIBUTE = "own_attribute"


class Candidate(NamedTuple):
    """One way of reading a field from a node.

    ``path`` is a qualified child name, or several joined with ``/`` for
    nested children. It is empty for attributes of the node itself.
    """

    kind: str
    path: str = ""
    attribute: Optional[str] = None


def child_text(path: str) -> Candidate:
    return Candidate(TEXT, path)


def child_attr(path: str, attribute: str) -> Candidate:
    return Candidate(ATTRIBUTE, path, attribute)


def child_markup(path: str) -> Candidate:
    return Candidate(MARKUP, path)


def child_full_text(path: str) -> Candidate:
    return Candidate(FULL_TEXT, path)


def own_attr(attribute: str) -> Candidate:
    return Candidate(OWN_ATTRIBUTE, attribute=attribute)


def _descend(node: Node, path: str) -> Optional[Node]:
    current: Optional[Node] = node
    for name in path.split("/"):
        if current is None:
            return None
        current = current.find(name)
    return current


def _raw_value(node: Node, candidate: Candidate) -> Optional[str]:
    if candidate.kind == OWN_ATTRIBUTE:
        return node.attributes.get(candidate.attribute or "")

    target = _descend(node, candidate.path)
    if target is None:
        return None
    if candidate.kind == TEXT:
        return target.text
    if candidate.kind == ATTRIBUTE:
        return target.attributes.get(candidate.attribute or "")
    if candidate.kind == MARKUP:
        return target.markup
    if candidate.kind == FULL_TEXT:
        return target.full_text
    raise ValueError(f"Unknown candidate kind: {candidate.kind}")


def resolve(node: Node, candidates: Iterable[Candidate]) -> Optional[str]:
    """Return the first non-blank value produced by ``candidates``, stripped.

    A candidate that is present but blank is treated like an absent one.
    """
    for candidate in candidates:
        value = _raw_value(node, candidate)
        if value:
            value = value.strip()
            if value:
                return value
    return None


def resolve_all(node: Node, name: str) -> list[Node]:
    """Return every child of ``node`` named ``name``, in document order."""
    return node.findall(name)


def require(
    node: Node, candidates: Iterable[Candidate], field: str, dialect: Dialect
) -> str:
    value = resolve(node, candidates)
    if value is None:
        raise FieldMissing(field, dialect)
    return value
