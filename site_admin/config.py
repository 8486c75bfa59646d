from __future__ import annotations
import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load .env early (no error if missing)
load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class AdminConfig:
    # Base URL of the site API; always set explicitly, never guessed from the host
    api_base: str = field(default_factory=lambda: _env("SITE_API_BASE", "http://localhost:5050").rstrip("/"))
    request_timeout: float = field(default_factory=lambda: float(_env("SITE_API_TIMEOUT", "30")))
    # Reference backend storage
    db_path: str | None = field(default_factory=lambda: _env("SITE_DB_PATH"))
    audit_dir: str | None = field(default_factory=lambda: _env("SITE_AUDIT_DIR"))
    log_level: str = field(default_factory=lambda: _env("SITE_LOG_LEVEL", "INFO").upper())
