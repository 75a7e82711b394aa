"""Parse -> filter -> render pipeline for reducing a page to readable HTML."""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from cleanpg.core.models import RenderConfig
from cleanpg.render.errors import (
    ParseErrorNode,
    RenderError,
    UnknownNodeVariant,
    VoidElementHasChildren,
)
from cleanpg.render.renderer import Renderer, render

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "html5lib"


def parse_html(data: Union[bytes, str], parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse a whole document into a BeautifulSoup tree.

    Attribute values are kept as the source strings (no class lists).
    """
    try:
        return BeautifulSoup(data, parser, multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise ParseErrorNode(str(exc)) from exc


def clean_html(
    data: Union[bytes, str],
    config: Optional[RenderConfig] = None,
    parser: str = DEFAULT_PARSER,
) -> str:
    """Return the cleaned rendering of a source HTML document."""
    soup = parse_html(data, parser)
    output = render(soup, config)
    logger.debug("Rendered %d bytes of source into %d characters", len(data), len(output))
    return output


__all__ = [
    "DEFAULT_PARSER",
    "ParseErrorNode",
    "RenderError",
    "Renderer",
    "UnknownNodeVariant",
    "VoidElementHasChildren",
    "clean_html",
    "parse_html",
    "render",
]
