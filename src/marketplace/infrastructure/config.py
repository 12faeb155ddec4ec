"""Runtime settings read from the environment.

    MARKET_DATA_DIR  directory holding the JSON documents (default: ./data)
    MARKET_ENV       development | production | test
    LOG_LEVEL        overrides the level implied by MARKET_ENV
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    environment: str
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.environment in ("production", "staging")

    @classmethod
    def from_env(cls) -> Settings:
        environment = os.getenv("MARKET_ENV", "development").strip().lower()
        data_dir = os.getenv("MARKET_DATA_DIR")
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else Path.cwd() / "data",
            environment=environment,
            log_level=os.getenv(
                "LOG_LEVEL", _LEVELS_BY_ENV.get(environment, "INFO")
            ).upper(),
        )
