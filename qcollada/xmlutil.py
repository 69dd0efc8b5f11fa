"""Helpers for reading COLLADA XML with the standard ElementTree API."""

from __future__ import annotations

import re
import struct
import xml.etree.ElementTree as ET
from collections.abc import Iterator

__all__ = [
    "local_name",
    "find_all",
    "first",
    "children_named",
    "text_of",
    "to_float",
    "to_int",
    "split_ws",
    "parse_xml",
]

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def local_name(tag) -> str:
    """Tag name without its ``{namespace}`` prefix; empty for comments and the like."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _descendants(element: ET.Element | None, tag: str) -> Iterator[ET.Element]:
    if element is None:
        return
    for candidate in element.iter():
        if candidate is not element and local_name(candidate.tag) == tag:
            yield candidate


def find_all(element: ET.Element | None, tag: str) -> list[ET.Element]:
    """All descendants named ``tag``, in document order; empty for a missing element."""
    return list(_descendants(element, tag))


def first(element: ET.Element | None, tag: str) -> ET.Element | None:
    """The first descendant named ``tag``, or None."""
    return next(_descendants(element, tag), None)


def children_named(element: ET.Element | None, tag: str) -> list[ET.Element]:
    """Direct children named ``tag``, in document order."""
    if element is None:
        return []
    return [child for child in element if local_name(child.tag) == tag]


def text_of(element: ET.Element | None) -> str:
    """All text inside an element, with surrounding whitespace removed."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def to_float(text: str) -> float:
    """Parse a single-precision float; anything unreadable or out of range gives 0.0."""
    text = text.strip()
    if not text or "_" in text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return 0.0


def to_int(text: str) -> int:
    """Parse a 32-bit decimal integer; anything unreadable or out of range gives 0."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text, 10)
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value


def split_ws(text: str) -> list[str]:
    """Split trimmed text on runs of whitespace; empty text gives ``['']``."""
    return _WHITESPACE.split(text.strip())


def parse_xml(text: str | bytes) -> ET.Element:
    """Parse a document and return its root element."""
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"malformed XML: {exc}") from exc