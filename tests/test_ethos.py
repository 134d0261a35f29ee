"""
Tests for the Ethos client, score cache, and service.

Uses a mocked requests.Session so tests run without network access.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from trustrace.core.exceptions import ENSResolutionError, EthosAPIError
from trustrace.ethos.cache import ScoreCache
from trustrace.ethos.client import EthosClient, is_ens_name
from trustrace.ethos.service import EthosService
from trustrace.reputation.tiers import TierName

ADDRESS = "0xAbC0000000000000000000000000000000000001"
BASE = "https://ethos.test/api/v2"


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# --- Client ---


def test_is_ens_name():
    assert is_ens_name("vitalik.eth")
    assert is_ens_name(" Vitalik.ETH ")
    assert not is_ens_name(ADDRESS)


def test_get_credibility_score(ethos_client, mock_session, make_response):
    mock_session.get.return_value = make_response({"score": 1520})
    assert ethos_client.get_credibility_score(ADDRESS) == 1520
    args, kwargs = mock_session.get.call_args
    assert args[0] == f"{BASE}/score/address"
    assert kwargs["params"] == {"address": ADDRESS}
    assert kwargs["headers"]["X-Ethos-Client"] == "trustrace-tests"
    assert kwargs["timeout"] == 5


def test_get_credibility_score_resolves_ens(ethos_client, mock_session, make_response):
    mock_session.get.side_effect = [
        make_response({"address": ADDRESS}),
        make_response({"score": 2100}),
    ]
    assert ethos_client.get_credibility_score("alice.eth") == 2100
    first, second = mock_session.get.call_args_list
    assert first.args[0] == f"{BASE}/ens/resolve/alice.eth"
    assert second.kwargs["params"] == {"address": ADDRESS}


def test_unresolvable_ens_raises(ethos_client, mock_session, make_response):
    """Failed ENS lookup -> resolve_ens returns None, score lookup raises ENSResolutionError."""
    mock_session.get.return_value = make_response({}, status_code=404)
    assert ethos_client.resolve_ens("ghost.eth") is None
    with pytest.raises(ENSResolutionError):
        ethos_client.get_credibility_score("ghost.eth")


def test_http_error_wrapped(ethos_client, mock_session, make_response):
    mock_session.get.return_value = make_response({"error": "boom"}, status_code=500)
    with pytest.raises(EthosAPIError) as exc_info:
        ethos_client.get_user_profile(ADDRESS)
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)
    assert exc_info.value.code == "ethos_api_error"


def test_transport_error_wrapped(ethos_client, mock_session):
    mock_session.get.side_effect = requests.ConnectionError("offline")
    with pytest.raises(EthosAPIError):
        ethos_client.get_user_vouches(ADDRESS)


def test_missing_score_raises(ethos_client, mock_session, make_response):
    mock_session.get.return_value = make_response({"score": None})
    with pytest.raises(EthosAPIError):
        ethos_client.get_credibility_score(ADDRESS)


def test_vouches_and_attestations(ethos_client, mock_session, make_response):
    mock_session.get.side_effect = [
        make_response([{"voucher": "a"}, {"voucher": "b"}]),
        make_response([{"id": "1"}]),
    ]
    assert len(ethos_client.get_user_vouches(ADDRESS)) == 2
    assert len(ethos_client.get_user_attestations(ADDRESS)) == 1
    vouch_call, attest_call = mock_session.get.call_args_list
    assert vouch_call.args[0] == f"{BASE}/vouches/by-user"
    assert vouch_call.kwargs["params"] == {"userKey": f"address:{ADDRESS}"}
    assert attest_call.args[0] == f"{BASE}/attestations/by-user"


def test_client_defaults_from_env(monkeypatch):
    monkeypatch.setenv("ETHOS_API_URL", "https://ethos.example/api/v2/")
    monkeypatch.setenv("ETHOS_CLIENT_NAME", "custom@1")
    monkeypatch.setenv("ETHOS_REQUEST_TIMEOUT", "12")
    client = EthosClient(session=MagicMock(spec=requests.Session))
    assert client.base_url == "https://ethos.example/api/v2"
    assert client.headers["X-Ethos-Client"] == "custom@1"
    assert client.timeout == 12.0


# --- Cache ---


def test_score_cache_ttl():
    clock = FakeClock()
    cache = ScoreCache(ttl_seconds=60, clock=clock)
    cache.set(ADDRESS, 1500)
    assert cache.get(ADDRESS.lower()) == 1500
    clock.now = 59
    assert cache.get(ADDRESS) == 1500
    clock.now = 60
    assert cache.get(ADDRESS) is None
    assert len(cache) == 0


def test_score_cache_invalidate_and_clear():
    cache = ScoreCache(ttl_seconds=60, clock=FakeClock())
    cache.set("a.eth", 1)
    cache.set("b.eth", 2)
    cache.invalidate("A.eth")
    assert cache.get("a.eth") is None
    cache.invalidate("missing.eth")
    cache.clear()
    assert cache.get("b.eth") is None


def test_score_cache_default_ttl(monkeypatch):
    assert ScoreCache().ttl_seconds == 3600
    monkeypatch.setenv("ETHOS_CACHE_TTL_SECONDS", "120")
    assert ScoreCache().ttl_seconds == 120.0


# --- Service ---


def test_service_get_score_uses_cache():
    client = MagicMock(spec=EthosClient)
    client.get_credibility_score.return_value = 1450
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))
    assert service.get_score(ADDRESS) == 1450
    assert service.get_score(ADDRESS) == 1450
    client.get_credibility_score.assert_called_once_with(ADDRESS)

    service.clear_cache_for_address(ADDRESS)
    service.get_score(ADDRESS)
    assert client.get_credibility_score.call_count == 2


def test_service_credibility_stats():
    client = MagicMock(spec=EthosClient)
    client.get_user_profile.return_value = {
        "credibilityScore": 1650,
        "vouchesGiven": 3,
        "profile": {"name": "Alice", "bio": "builder"},
    }
    client.get_user_vouches.return_value = [{}, {}, {}, {}]
    client.get_user_attestations.return_value = [{}]
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))

    profile = service.get_user_profile(ADDRESS)
    assert profile.name == "Alice"
    assert profile.avatar == ""

    stats = service.get_credibility_stats(ADDRESS)
    assert stats.score == 1650
    assert stats.level == "Established"
    assert stats.tier.name == TierName.CREATOR
    assert stats.vote_power == 2.0
    assert stats.can_create_contest is True
    assert stats.vouches_received == 4
    assert stats.vouches_given == 3
    assert stats.attestations == 1
    # profile fetch refreshes the score cache
    assert service.get_score(ADDRESS) == 1650
    client.get_credibility_score.assert_not_called()


def test_service_profile_missing_score():
    client = MagicMock(spec=EthosClient)
    client.get_user_profile.return_value = {}
    client.get_user_vouches.return_value = []
    client.get_user_attestations.return_value = []
    stats = EthosService(client=client, cache=ScoreCache(ttl_seconds=60)).get_credibility_stats(ADDRESS)
    assert stats.score == 0
    assert stats.tier.name == TierName.OBSERVER
    assert stats.can_create_contest is False


def test_score_cache_set_purges_expired_entries():
    """Writing a score drops entries past the TTL even if they are never read again."""
    clock = FakeClock()
    cache = ScoreCache(ttl_seconds=60, clock=clock)
    cache.set("old.eth", 900)
    clock.now = 30
    cache.set("recent.eth", 1000)
    clock.now = 61
    cache.set("new.eth", 1100)
    assert len(cache) == 2
    assert cache.get("recent.eth") == 1000
    clock.now = 200
    assert cache.purge_expired() == 2
    assert len(cache) == 0


def test_profile_without_score_does_not_poison_score_cache():
    """A profile with no score must not cache 0; get_score still asks the client."""
    client = MagicMock(spec=EthosClient)
    client.get_user_profile.return_value = {}
    client.get_user_vouches.return_value = []
    client.get_user_attestations.return_value = []
    client.get_credibility_score.return_value = 1800
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))

    assert service.get_credibility_stats(ADDRESS).score == 0
    assert service.get_score(ADDRESS) == 1800
    client.get_credibility_score.assert_called_once_with(ADDRESS)


def test_check_credibility_requirement():
    client = MagicMock(spec=EthosClient)
    client.get_credibility_score.return_value = 1400
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))
    assert service.check_credibility_requirement(ADDRESS, 1400) is True
    assert service.check_credibility_requirement(ADDRESS, 1401) is False


def test_check_credibility_requirement_lookup_failure():
    """API or ENS failures deny the requirement instead of raising."""
    client = MagicMock(spec=EthosClient)
    client.get_credibility_score.side_effect = EthosAPIError("down")
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))
    assert service.check_credibility_requirement(ADDRESS, 0) is False

    client.get_credibility_score.side_effect = ENSResolutionError("no such name")
    assert service.check_credibility_requirement("ghost.eth", 0) is False


def test_batch_get_user_profiles_skips_failures():
    """Addresses whose lookup fails are left out; the rest keep input order."""
    good_a = "0x000000000000000000000000000000000000000a"
    bad = "0x000000000000000000000000000000000000000b"
    good_c = "0x000000000000000000000000000000000000000c"

    def profile(address):
        if address == bad:
            raise EthosAPIError("Ethos request failed")
        return {"credibilityScore": 1000 if address == good_a else 2000}

    client = MagicMock(spec=EthosClient)
    client.get_user_profile.side_effect = profile
    client.get_user_vouches.return_value = []
    client.get_user_attestations.return_value = []
    service = EthosService(client=client, cache=ScoreCache(ttl_seconds=60, clock=FakeClock()))

    profiles = service.batch_get_user_profiles([good_a, bad, good_c])
    assert [p.address for p in profiles] == [good_a, good_c]
    assert [p.credibility_score for p in profiles] == [1000, 2000]
    assert service.batch_get_user_profiles([]) == []
