"""Classification of BeautifulSoup tree objects into renderer node kinds."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)


class NodeKind(str, Enum):
    ERROR = "error"
    TEXT = "text"
    DOCUMENT = "document"
    ELEMENT = "element"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    RAW = "raw"


class ParseErrorMarker(NavigableString):
    """A string node a tree builder leaves where the source failed to parse.

    Its text is the parser's error message.
    """


def node_kind(node: object) -> Optional[NodeKind]:
    """Return the kind of ``node``, or None for objects the renderer doesn't know.

    Order matters: every special string type subclasses NavigableString and
    BeautifulSoup subclasses Tag.
    """
    if isinstance(node, ParseErrorMarker):
        return NodeKind.ERROR
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Doctype):
        return NodeKind.DOCTYPE
    # HTML5 parsers turn <?...?> and <!...> into comments
    if isinstance(node, (Comment, ProcessingInstruction, Declaration)):
        return NodeKind.COMMENT
    if isinstance(node, CData):
        return NodeKind.RAW
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return None
