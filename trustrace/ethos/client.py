"""
Ethos API v2 client: credibility scores, profiles, vouches, attestations.

Inputs ending in ".eth" are resolved to an address first. Every request sends
the X-Ethos-Client header. Transport errors and non-2xx responses raise
EthosAPIError; ENS lookups log and return None instead.
"""

from __future__ import annotations

from typing import Any

import requests

from trustrace.config.env import (
    get_ethos_api_url,
    get_ethos_client_name,
    get_request_timeout,
)
from trustrace.core.exceptions import ENSResolutionError, EthosAPIError
from trustrace.trustrace_logging import get_logger

logger = get_logger(__name__)

ENS_SUFFIX = ".eth"


def is_ens_name(value: str) -> bool:
    return value.strip().lower().endswith(ENS_SUFFIX)


class EthosClient:
    """Synchronous Ethos API client over a requests.Session."""

    def __init__(
        self,
        base_url: str | None = None,
        client_name: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or get_ethos_api_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.session = session or requests.Session()
        self.headers = {
            "X-Ethos-Client": client_name or get_ethos_client_name(),
            "Content-Type": "application/json",
        }

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.get(url, headers=self.headers, params=params, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("ethos_request_failed", path=path, error=str(e))
            raise EthosAPIError(f"Ethos request failed: {path}", path=path) from e

    def resolve_ens(self, ens_name: str) -> str | None:
        """Resolve an ENS name to an address; None if Ethos cannot resolve it."""
        try:
            data = self._get(f"/ens/resolve/{ens_name}")
        except EthosAPIError:
            logger.warning("ens_resolution_failed", ens_name=ens_name)
            return None
        address = data.get("address") if isinstance(data, dict) else None
        return address or None

    def _resolve_address(self, address_or_ens: str) -> str:
        if not is_ens_name(address_or_ens):
            return address_or_ens
        address = self.resolve_ens(address_or_ens)
        if not address:
            raise ENSResolutionError(
                f"Failed to resolve ENS name: {address_or_ens}", ens_name=address_or_ens
            )
        return address

    def get_credibility_score(self, address_or_ens: str) -> float:
        address = self._resolve_address(address_or_ens)
        data = self._get("/score/address", params={"address": address})
        score = data.get("score") if isinstance(data, dict) else None
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise EthosAPIError("Ethos score response missing numeric score", address=address)
        logger.debug("ethos_score_fetched", address=address, score=score)
        return score

    def get_user_profile(self, address_or_ens: str) -> dict[str, Any]:
        address = self._resolve_address(address_or_ens)
        data = self._get(f"/user/by/address/{address}")
        return data if isinstance(data, dict) else {}

    def get_user_vouches(self, address_or_ens: str) -> list[dict[str, Any]]:
        address = self._resolve_address(address_or_ens)
        data = self._get("/vouches/by-user", params={"userKey": f"address:{address}"})
        return data if isinstance(data, list) else []

    def get_user_attestations(self, address_or_ens: str) -> list[dict[str, Any]]:
        address = self._resolve_address(address_or_ens)
        data = self._get("/attestations/by-user", params={"userKey": f"address:{address}"})
        return data if isinstance(data, list) else []
