"""Errors raised while rendering a parsed document."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for failures that abort a render call."""


class ParseErrorNode(RenderError):
    """The parser flagged an error in the source document."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"cleanpg: error node [{detail}]")


class UnknownNodeVariant(RenderError):
    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"html: unknown node type {type(node).__name__}")


class VoidElementHasChildren(RenderError):
    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(f"html: void element <{tag_name}> has child nodes")
