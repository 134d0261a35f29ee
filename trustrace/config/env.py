"""
Environment variable loading for TrustRace.

- ETHOS_API_URL: Ethos API v2 base URL (default: public endpoint)
- ETHOS_CLIENT_NAME: value sent in the X-Ethos-Client header
- ETHOS_CACHE_TTL_SECONDS: credibility score cache lifetime (default: 1 hour)
- ETHOS_REQUEST_TIMEOUT: HTTP timeout in seconds (default: 30)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is trustrace/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_ETHOS_API_URL = "https://api.ethos.network/api/v2"
DEFAULT_ETHOS_CLIENT_NAME = "trustrace@v1.0.0"
DEFAULT_SCORE_CACHE_TTL = 60 * 60
DEFAULT_REQUEST_TIMEOUT = 30.0


def load_trustrace_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set vars."""
    load_dotenv(_ENV_PATH)


def _positive_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_ethos_api_url() -> str:
    """Return ETHOS_API_URL without a trailing slash."""
    load_trustrace_env()
    url = (os.getenv("ETHOS_API_URL") or "").strip() or DEFAULT_ETHOS_API_URL
    return url.rstrip("/")


def get_ethos_client_name() -> str:
    load_trustrace_env()
    return (os.getenv("ETHOS_CLIENT_NAME") or "").strip() or DEFAULT_ETHOS_CLIENT_NAME


def get_score_cache_ttl() -> float:
    """
    Return ETHOS_CACHE_TTL_SECONDS as seconds.
    Missing, unparsable or non-positive values fall back to one hour.
    """
    load_trustrace_env()
    return _positive_float("ETHOS_CACHE_TTL_SECONDS", DEFAULT_SCORE_CACHE_TTL)


def get_request_timeout() -> float:
    load_trustrace_env()
    return _positive_float("ETHOS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
