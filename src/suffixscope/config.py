from __future__ import annotations

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = REPO_ROOT / "data"
PSL_FILENAME = "public_suffix_list.dat"
PSL_URL = "https://publicsuffix.org/list/public_suffix_list.dat"

DEFAULT_SERVICE_HOST = "127.0.0.1"
DEFAULT_SERVICE_PORT = 8788
DEFAULT_LOG_LEVEL = "INFO"


def get_psl_path() -> Path:
    return Path(os.getenv("SUFFIXSCOPE_PSL_PATH", DATA_DIR / PSL_FILENAME))


def get_log_level() -> str:
    return os.getenv("SUFFIXSCOPE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
