"""Runtime settings, read from the environment.

AMS_DATA_DIR   directory holding the JSON collections (default: <repo>/data)
AMS_LOG_LEVEL  logging level name (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            data_dir=Path(env.get("AMS_DATA_DIR", _DEFAULT_DATA_DIR)),
            log_level=env.get("AMS_LOG_LEVEL", "INFO").upper(),
        )
