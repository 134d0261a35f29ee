"""
Configuration for TrustRace.

Settings come from environment variables and an optional .env file at the
project root. Only the Ethos client is configurable; the tier table is fixed.
"""

from trustrace.config.env import (  # noqa: F401
    get_ethos_api_url,
    get_ethos_client_name,
    get_request_timeout,
    get_score_cache_ttl,
    load_trustrace_env,
)

__all__ = [
    "get_ethos_api_url",
    "get_ethos_client_name",
    "get_request_timeout",
    "get_score_cache_ttl",
    "load_trustrace_env",
]
