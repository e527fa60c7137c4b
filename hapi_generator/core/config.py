"""Runtime configuration for the generator.

Every value can be overridden through an environment variable; CLI flags
override these again per invocation.
"""

import os
from pathlib import Path

PLACEHOLDER_VERSION = "latest"
DEFAULT_LOOKUP_TIMEOUT_MS = 1900
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


def _default_settings_file() -> Path:
    """Return the per-user settings path (XDG config dir when set)."""
    config_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "hapi-composer" / "settings.yaml"


def _timeout_from_env() -> int:
    raw = os.getenv("HAPI_COMPOSER_LOOKUP_TIMEOUT_MS", "").strip()
    if not raw:
        return DEFAULT_LOOKUP_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_LOOKUP_TIMEOUT_MS
    return value if value > 0 else DEFAULT_LOOKUP_TIMEOUT_MS


SETTINGS_FILE = Path(
    os.getenv("HAPI_COMPOSER_SETTINGS") or _default_settings_file()
).expanduser()
REGISTRY_URL = os.getenv("HAPI_COMPOSER_REGISTRY", DEFAULT_REGISTRY_URL).rstrip("/")
LOOKUP_TIMEOUT_MS = _timeout_from_env()
