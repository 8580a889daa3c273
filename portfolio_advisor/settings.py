"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    app_name: str = "ai-portfolio-advisor"
    host: str = "0.0.0.0"
    port: int = 5005
    openai_api_key: str | None = None
    openai_model: str = "gpt-4-turbo"
    cors_origins: tuple[str, ...] = ("http://localhost:5005",)
    static_dir: Path = field(default=DEFAULT_STATIC_DIR)
    log_level: str = "INFO"


def _as_int(value: str | None, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _as_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None or value.strip() == "":
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


def get_settings() -> Settings:
    """Load runtime settings from environment variables."""
    load_dotenv()

    static_dir = os.getenv("STATIC_DIR")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_as_int(os.getenv("PORT"), 5005),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL") or "gpt-4-turbo",
        cors_origins=_as_list(os.getenv("CORS_ORIGINS"), ("http://localhost:5005",)),
        static_dir=Path(static_dir) if static_dir else DEFAULT_STATIC_DIR,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
