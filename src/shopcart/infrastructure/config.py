"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    api_url: str = "http://localhost:3333"
    api_timeout: float = 10.0
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> Settings:
        defaults = Settings()
        timeout = os.environ.get("SHOPCART_API_TIMEOUT", "")
        data_dir = os.environ.get("SHOPCART_DATA_DIR", "")
        return Settings(
            api_url=os.environ.get("SHOPCART_API_URL", defaults.api_url),
            api_timeout=float(timeout) if timeout else defaults.api_timeout,
            data_dir=Path(data_dir) if data_dir else defaults.data_dir,
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level).upper(),
        )
