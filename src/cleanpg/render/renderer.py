"""Recursive renderer that re-serializes a parsed document through the whitelist."""

from __future__ import annotations

from typing import Optional

from bs4.element import PageElement, Tag

from cleanpg.core.models import RenderConfig
from cleanpg.render.decision import (
    TraversalState,
    is_attribute_renderable,
    is_element_renderable,
)
from cleanpg.render.errors import ParseErrorNode, UnknownNodeVariant, VoidElementHasChildren
from cleanpg.render.escape import clean_style, escape, is_whitespace
from cleanpg.render.nodes import NodeKind, node_kind
from cleanpg.render.policy import is_void, lookup_policy

DOCTYPE = "<!DOCTYPE html>"


class Renderer:
    """Walks a BeautifulSoup tree and emits the reduced HTML.

    The tree is only read, never modified. Output is appended to a list of
    string parts and joined once the walk finishes.
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self.state = TraversalState()
        self._parts: list[str] = []

    def render(self, node: PageElement, state: Optional[TraversalState] = None) -> str:
        """Render ``node`` and everything below it.

        A fresh TraversalState is used unless the caller passes one in.
        """
        self.state = state if state is not None else TraversalState()
        self._parts = []
        self._render_node(node)
        return "".join(self._parts)

    def _render_node(self, node: PageElement) -> None:
        kind = node_kind(node)

        if kind is NodeKind.ERROR:
            raise ParseErrorNode(str(node))
        if kind is NodeKind.TEXT:
            if not is_whitespace(node):
                self._parts.append(escape(node))
            return
        if kind is NodeKind.DOCUMENT:
            for child in node.contents:
                self._render_node(child)
            return
        if kind is NodeKind.ELEMENT:
            self._render_element(node)
            return
        if kind is NodeKind.COMMENT:
            return
        if kind is NodeKind.DOCTYPE:
            # Use our own doctype instead of the source's
            self._parts.append(DOCTYPE)
            return
        if kind is NodeKind.RAW:
            self._parts.append(str(node))
            return
        raise UnknownNodeVariant(node)

    def _render_element(self, node: Tag) -> None:
        rendered = is_element_renderable(node.name, self.state, self.config)
        if rendered:
            self._render_start_tag(node)

        for child in node.contents:
            # Text under an unrenderable parent (<script>, <style>...) is dropped
            if node_kind(child) is NodeKind.TEXT and not is_element_renderable(
                node.name, self.state, self.config
            ):
                continue
            self._render_node(child)

        if rendered and not is_void(node.name.lower()):
            self._parts.append(f"</{node.name}>")

    def _render_start_tag(self, node: Tag) -> None:
        tag = node.name.lower()
        # Leading newline keeps the output readable
        self._parts.append(f"\n<{node.name}")

        policy = lookup_policy(tag)
        if self.config.inject_style and policy is not None and policy.style:
            self._parts.append(f' style="{clean_style(policy.style)}"')

        self._render_attributes(node)

        if is_void(tag):
            if node.contents:
                raise VoidElementHasChildren(node.name)
            self._parts.append("/>")
        else:
            self._parts.append(">")

    def _render_attributes(self, node: Tag) -> None:
        for key, value in node.attrs.items():
            # NamespacedAttribute keys carry a prefix and a local name
            name = getattr(key, "name", None) or key
            prefix = getattr(key, "prefix", None)
            if not is_attribute_renderable(node.name, name):
                continue
            if isinstance(value, list):
                value = " ".join(value)
            qualified = f"{prefix}:{name}" if prefix and name != prefix else name
            self._parts.append(f' {qualified}="{escape(value)}"')


def render(
    node: PageElement,
    config: Optional[RenderConfig] = None,
    state: Optional[TraversalState] = None,
) -> str:
    """Render a parsed document (or any subtree) to the reduced HTML subset."""
    return Renderer(config).render(node, state)
