"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from cleanpg.core.models import AppConfig, HttpConfig, LoggingConfig, RenderConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return bool(default)
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    # Load YAML
    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}
    elif config_path:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Renderer toggles
    render_data = yaml_data.get("render") or {}
    render = RenderConfig(
        canonical_mode=_env_bool("CLEANPG_CANONICAL_MODE", render_data.get("canonical_mode", False)),
        inject_style=_env_bool("CLEANPG_INJECT_STYLE", render_data.get("inject_style", True)),
        render_links=_env_bool("CLEANPG_RENDER_LINKS", render_data.get("render_links", True)),
    )

    # HTTP client
    http_data = yaml_data.get("http") or {}
    http = HttpConfig(
        timeout=float(os.getenv("CLEANPG_HTTP_TIMEOUT", http_data.get("timeout", 30.0))),
        max_retries=int(os.getenv("CLEANPG_HTTP_RETRIES", http_data.get("max_retries", 2))),
        **({"user_agent": http_data["user_agent"]} if "user_agent" in http_data else {}),
    )

    # Log file
    log_data = yaml_data.get("logging") or {}
    logging_cfg = LoggingConfig(
        log_file=os.getenv("CLEANPG_LOG_FILE", log_data.get("log_file", "log.txt")),
        level=os.getenv("CLEANPG_LOG_LEVEL", log_data.get("level", "INFO")).upper(),
    )

    parser = os.getenv("CLEANPG_PARSER", yaml_data.get("parser", "html5lib"))

    return AppConfig(
        render=render,
        http=http,
        logging=logging_cfg,
        parser=parser,
    )
