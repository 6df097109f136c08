"""Project-level configuration and environment loading."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "relay.log"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the relay bot."""

    bot_token: str
    admin_id: int
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: str | None = None

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks
        return (
            f"Settings(admin_id={self.admin_id}, host={self.host!r}, "
            f"port={self.port}, log_level={self.log_level!r})"
        )


def _parse_int(name: str, raw: str | None) -> int:
    if raw is None or not raw.strip():
        raise ConfigError(f"{name} is missing")
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings instance

    Raises:
        ConfigError: TELEGRAM_BOT_TOKEN or ADMIN_ID is missing or invalid.
    """
    env = os.environ if environ is None else environ

    token = (env.get("TELEGRAM_BOT_TOKEN") or "").strip()
    if not token:
        raise ConfigError("TELEGRAM_BOT_TOKEN is missing")

    admin_id = _parse_int("ADMIN_ID", env.get("ADMIN_ID"))

    port = DEFAULT_PORT
    if env.get("PORT"):
        port = _parse_int("PORT", env.get("PORT"))

    return Settings(
        bot_token=token,
        admin_id=admin_id,
        host=env.get("HOST") or DEFAULT_HOST,
        port=port,
        log_level=env.get("LOG_LEVEL") or "INFO",
        log_file=env.get("LOG_FILE") or None,
    )
