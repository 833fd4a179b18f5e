"""Settings modules, one per deployment environment.

``APP_ENV`` names the environment; anything unrecognised runs with the
development settings.
"""

import os

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"config.{_ENV_ALIASES.get(env, 'development')}"
