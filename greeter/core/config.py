# greeter/core/config.py

import os
from typing import Final, Optional

from dotenv import load_dotenv


class Settings:
    """
    Service settings, read from the environment with defaults.
    """

    def __init__(self) -> None:
        self.host: Final[str] = os.getenv("GREETER_HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("GREETER_PORT", "4000"))
        self.log_level: Final[str] = os.getenv("GREETER_LOG_LEVEL", "INFO").upper()

        # Optional CSV of users (first_name,last_name,email) loaded at startup
        self.users_csv: Final[Optional[str]] = os.getenv("GREETER_USERS_CSV") or None


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Settings for the process, built once. Values from a local .env file are
    applied first; real environment variables win.
    """
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings
