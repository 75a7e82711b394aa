from __future__ import annotations

import pytest

from cleanpg.core.models import RenderConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep CLEANPG_* settings from the developer's shell out of the tests."""
    for name in (
        "CLEANPG_CANONICAL_MODE",
        "CLEANPG_INJECT_STYLE",
        "CLEANPG_RENDER_LINKS",
        "CLEANPG_HTTP_TIMEOUT",
        "CLEANPG_HTTP_RETRIES",
        "CLEANPG_LOG_FILE",
        "CLEANPG_LOG_LEVEL",
        "CLEANPG_PARSER",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def plain() -> RenderConfig:
    """Renderer config without style injection, for readable expectations."""
    return RenderConfig(inject_style=False)
