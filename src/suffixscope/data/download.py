from __future__ import annotations

import logging
from pathlib import Path
from urllib.error import URLError
from urllib.request import Request, urlopen

from suffixscope.config import DATA_DIR, PSL_FILENAME, PSL_URL
from suffixscope.exceptions import RuleSourceError

logger = logging.getLogger(__name__)


def _fetch(url: str, timeout: int = 30) -> bytes:
    req = Request(url, headers={"User-Agent": "suffixscope/0.1"})
    with urlopen(req, timeout=timeout) as resp:  # noqa: S310 - controlled URLs
        return resp.read()


def download_psl(
    url: str = PSL_URL,
    output_dir: Path | None = None,
    fallback_local: Path | None = None,
) -> Path:
    output_dir = output_dir or DATA_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / PSL_FILENAME

    if fallback_local and fallback_local.exists():
        logger.info("Using local Public Suffix List: %s", fallback_local)
        output_path.write_bytes(fallback_local.read_bytes())
        return output_path

    logger.info("Downloading Public Suffix List from %s", url)
    try:
        payload = _fetch(url)
    except (URLError, TimeoutError) as exc:
        raise RuleSourceError(
            "Failed to download the Public Suffix List. Provide --local path as fallback."
        ) from exc

    output_path.write_bytes(payload)
    logger.info("Wrote %s bytes to %s", len(payload), output_path)
    return output_path
