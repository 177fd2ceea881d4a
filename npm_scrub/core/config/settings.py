# File: npm_scrub/core/config/settings.py

import logging
from typing import Optional


class Settings:
    # --- Manifests ---
    MANIFEST_FILENAME: str = "package.json"
    PRIVATE_FIELD_PREFIX: str = "_"
    ENCODING: str = "utf-8"

    # --- Serialization ---
    # Matches JSON.stringify(obj, null, 2) as written by npm
    JSON_INDENT: int = 2

    # --- Concurrency ---
    # None keeps the walk unbounded. A positive int caps in-flight
    # filesystem calls for a single invocation.
    MAX_IN_FLIGHT_IO: Optional[int] = None

    # --- Logging (CLI only, the library never installs handlers) ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL.upper())


settings = Settings()
