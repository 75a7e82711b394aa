"""Element whitelist: renderable tags, their attributes and inline styles."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class PolicyEntry:
    tag_name: str
    attributes: tuple[str, ...] = ()
    style: str = ""


def _entry(tag_name: str, attributes: tuple[str, ...] = (), style: str = "") -> tuple[str, PolicyEntry]:
    return tag_name, PolicyEntry(tag_name=tag_name, attributes=attributes, style=style)


# Void elements (can't have any contents), section 12.1.2 of the HTML reference
VOID_ELEMENTS: frozenset[str] = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

# Tags to render. Element reference: https://developer.mozilla.org/en-US/docs/Web/HTML/Element
POLICIES: Mapping[str, PolicyEntry] = MappingProxyType(dict([
    # Main root
    _entry("html", style="""
		margin: auto;
		height: 100%;
		display: table;
		background: #d6dede;
		"""),

    # Document metadata
    _entry("head"),
    _entry("title"),

    # Sectioning root
    _entry("body", style="""
		margin: 0 auto;
		padding-left: 20px;
		padding-right: 20px;
		height: 100%;
		font: 115% 'PT Sans', 'Helvetica', sans-serif;
		max-width: 800px;
		color: #555753; 
		background: #fff; 
		display: table-cell;
		vertical-align: middle;
		"""),
    _entry("div"),
    _entry("span"),

    # Content sectioning
    _entry("h1", style="""
		font-size: 175%;
		margin-top: 40px;
		"""),
    _entry("h2", style="""
		font-size: 145%;
		margin-top: 30px;
		"""),
    _entry("h3", style="""
		font-size: 130%;
		margin-top: 20px;
		"""),
    _entry("h4"),
    _entry("h5"),
    _entry("h6"),

    # Text content
    _entry("p"),
    _entry("blockquote"),
    _entry("pre", style="""font-family: Menlo, monospace;
		font-size: 0.875rem;"""),
    _entry("code", style="""font-family: Menlo, monospace;
		word-spacing: -0.3em;
		font-size: 0.875rem;"""),

    # Inline text semantics
    _entry("a", attributes=("href",)),
    _entry("b"),
    _entry("em"),
    _entry("i"),
    _entry("br"),

    # Table content
    _entry("caption"),
    _entry("col"),
    _entry("colgroup"),
    _entry("table"),
    _entry("tbody"),
    _entry("td"),
    _entry("tfoot"),
    _entry("th"),
    _entry("thead"),
    _entry("tr"),
]))


def lookup_policy(tag_name: str) -> Optional[PolicyEntry]:
    """Return the policy for an already-lowercased tag name, or None."""
    return POLICIES.get(tag_name)


def is_void(tag_name: str) -> bool:
    return tag_name in VOID_ELEMENTS
