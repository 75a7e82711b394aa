"""Pydantic configuration models for cleanpg."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RenderConfig(BaseModel):
    """Renderer toggles. Frozen: read-only for the whole of a render call."""

    model_config = ConfigDict(frozen=True)

    canonical_mode: bool = False
    inject_style: bool = True
    render_links: bool = True


class HttpConfig(BaseModel):
    timeout: float = 30.0
    max_retries: int = Field(default=2, ge=0)
    user_agent: str = "cleanpg/0.1 (+https://github.com/scu/cleanpg)"


class LoggingConfig(BaseModel):
    log_file: str = "log.txt"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AppConfig(BaseModel):
    render: RenderConfig = Field(default_factory=RenderConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: str = "html5lib"
