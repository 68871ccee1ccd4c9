"""
config.py
---------
Central configuration module. Loads environment variables from the .env
file and exposes them as a typed, immutable Settings object.

The settings are built once in main.py and handed to the CleverTap client
and the message dispatcher.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()


# ── Defaults ──────────────────────────────────────────────
DEFAULT_CLEVERTAP_API_BASE_URL: str = "https://api.clevertap.com"  # eu1, in1, ... for other regions
DEFAULT_TIMEOUT_SECONDS: float = 10.0

REQUIRED_VARS = (
    "TELEGRAM_BOT_TOKEN",
    "CLEVERTAP_ACCOUNT_ID",
    "CLEVERTAP_ACCOUNT_PASSCODE",
)

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration.

    Attributes:
        telegram_bot_token: Bot API token from @BotFather.
        clevertap_account_id: Sent as X-CleverTap-Account-Id.
        clevertap_passcode: Sent as X-CleverTap-Passcode.
        clevertap_api_base_url: Regional API host, without trailing slash.
        request_timeout: Upper bound for one upload request, in seconds.
        log_level: Root log level name.
        telegram_debug: Verbose logging of the Telegram and HTTP layers.
    """
    telegram_bot_token: str
    clevertap_account_id: str
    clevertap_passcode: str
    clevertap_api_base_url: str = DEFAULT_CLEVERTAP_API_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"
    telegram_debug: bool = False

    @property
    def upload_url(self) -> str:
        return f"{self.clevertap_api_base_url}/1/upload"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A populated Settings instance.

    Raises:
        ConfigError: If a required variable is missing/empty or the timeout is not a number.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_VARS if not env.get(name, "").strip()]
    if missing:
        raise ConfigError(
            f"Environment variables {', '.join(REQUIRED_VARS)} must be set "
            f"(missing: {', '.join(missing)})"
        )

    raw_timeout = env.get("CLEVERTAP_TIMEOUT_SECONDS", "")
    try:
        timeout = float(raw_timeout) if raw_timeout.strip() else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        raise ConfigError(f"CLEVERTAP_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigError("CLEVERTAP_TIMEOUT_SECONDS must be positive")

    base_url = env.get("CLEVERTAP_API_BASE_URL", "").strip() or DEFAULT_CLEVERTAP_API_BASE_URL

    return Settings(
        telegram_bot_token=env["TELEGRAM_BOT_TOKEN"].strip(),
        clevertap_account_id=env["CLEVERTAP_ACCOUNT_ID"].strip(),
        clevertap_passcode=env["CLEVERTAP_ACCOUNT_PASSCODE"].strip(),
        clevertap_api_base_url=base_url.rstrip("/"),
        request_timeout=timeout,
        log_level=env.get("LOG_LEVEL", "INFO").strip() or "INFO",
        telegram_debug=env.get("TELEGRAM_DEBUG", "").strip().lower() in _TRUTHY,
    )
