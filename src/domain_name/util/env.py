"""Load configuration from the environment and an optional .env file.

Settings come from .env in the working directory (if present) and the
process environment. Everything has a default; CLI flags override.

    TLDS_FILE     path to a TLD list (default: bundled tlds.txt)
    OUT_DIR       report directory (default: out)
    ENABLE_EXCEL  true/false (default: false)
    WORKERS       batch worker threads (default: auto from CPU count)
    LOG_LEVEL     DEBUG/INFO/WARNING/ERROR (default: INFO)
    LOG_FILE      optional log file path
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from .types import DetectorConfig


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def load_config(env_file: Optional[Path] = None) -> DetectorConfig:
    """Load configuration, reading .env first if it exists.

    Crashes early (ValueError) on values that cannot be parsed.
    """
    env_file = Path(env_file) if env_file else Path.cwd() / ".env"
    
    if env_file.exists():
        load_dotenv(env_file)
    
    workers_raw = os.getenv("WORKERS", "1")
    try:
        workers = int(workers_raw)
    except ValueError:
        raise ValueError(f"WORKERS must be an integer, got {workers_raw!r}")
    
    config = DetectorConfig(
        tlds_file=os.getenv("TLDS_FILE") or None,
        out_dir=os.getenv("OUT_DIR", "out"),
        enable_excel=_env_bool("ENABLE_EXCEL"),
        workers=workers,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
    
    return config
