"""Renderability decisions for elements and attributes."""

from __future__ import annotations

from dataclasses import dataclass

from cleanpg.core.models import RenderConfig
from cleanpg.render.policy import lookup_policy


@dataclass
class TraversalState:
    """Per-render flags driving canonical mode.

    Canonical mode renders nothing between <body> and the first <h1>, which
    skips the navigation and banner boilerplate most pages lead with.
    """

    seen_body_element: bool = False
    seen_first_heading: bool = False


def is_element_renderable(tag_name: str, state: TraversalState, config: RenderConfig) -> bool:
    """Decide whether an element's tags are emitted. May update ``state``."""
    tag = tag_name.lower()

    if lookup_policy(tag) is None:
        return False

    if tag == "a" and not config.render_links:
        return False

    if not config.canonical_mode:
        return True

    render = True
    if tag == "body":
        state.seen_body_element = True

    if state.seen_body_element and not state.seen_first_heading and tag != "body":
        render = False

    # Must follow the suppression check so the first <h1> still renders
    if tag == "h1":
        state.seen_first_heading = True
        render = True

    return render


def is_attribute_renderable(tag_name: str, attribute_name: str) -> bool:
    policy = lookup_policy(tag_name.lower())
    if policy is None or not policy.attributes:
        return False
    return attribute_name in policy.attributes
