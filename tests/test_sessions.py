# tests/test_sessions.py

"""
Tests for the server-side session store and the session cookie codec.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from fastapi import Response

from gestion_brigades.core.roles import Role
from gestion_brigades.core.sessions import InMemorySessionStore, SessionCookieCodec


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds: int):
        self.now += timedelta(seconds=seconds)


def test_create_then_lookup_returns_session():
    store = InMemorySessionStore(ttl_seconds=60)
    token = store.create("7", Role.CHEF_BRIGADE, brigade_id=3)
    session = store.lookup(token)
    assert session is not None
    assert session.subject_id == "7"
    assert session.role == Role.CHEF_BRIGADE
    assert session.brigade_id == 3
    assert session.expires_at - session.issued_at == timedelta(seconds=60)


def test_tokens_are_random_and_not_derived_from_subject():
    store = InMemorySessionStore()
    tokens = {store.create("7", Role.CHEF_SECTION) for _ in range(50)}
    assert len(tokens) == 50
    for token in tokens:
        # 32 random bytes, url-safe base64
        assert len(token) >= 43
        assert "chef_section" not in token


def test_lookup_unknown_or_empty_token_returns_none():
    store = InMemorySessionStore()
    assert store.lookup("nope") is None
    assert store.lookup("") is None


def test_invalidate_removes_access_immediately():
    store = InMemorySessionStore()
    token = store.create("1", Role.CHEF_SECTION)
    store.invalidate(token)
    assert store.lookup(token) is None
    # Invalidating twice is harmless
    store.invalidate(token)


def test_expired_session_is_not_returned_and_is_evicted():
    clock = FakeClock()
    store = InMemorySessionStore(ttl_seconds=10, clock=clock)
    token = store.create("1", Role.CHEF_SECTION)
    clock.advance(9)
    assert store.lookup(token) is not None
    clock.advance(1)
    assert store.lookup(token) is None
    assert len(store) == 0


def test_invalidate_subject_only_targets_that_subject_and_role():
    store = InMemorySessionStore()
    a1 = store.create("5", Role.CHEF_BRIGADE, brigade_id=1)
    a2 = store.create("5", Role.CHEF_BRIGADE, brigade_id=1)
    other_role = store.create("5", Role.CHEF_SECTION)
    other_subject = store.create("6", Role.CHEF_BRIGADE, brigade_id=2)

    assert store.invalidate_subject("5", Role.CHEF_BRIGADE) == 2
    assert store.lookup(a1) is None
    assert store.lookup(a2) is None
    assert store.lookup(other_role) is not None
    assert store.lookup(other_subject) is not None


def test_purge_expired_removes_only_expired_sessions():
    clock = FakeClock()
    store = InMemorySessionStore(ttl_seconds=10, clock=clock)
    store.create("1", Role.CHEF_SECTION)
    clock.advance(5)
    fresh = store.create("2", Role.CHEF_SECTION)
    clock.advance(6)
    assert store.purge_expired() == 1
    assert len(store) == 1
    assert store.lookup(fresh) is not None


def test_concurrent_logins_and_logouts_do_not_corrupt_each_other():
    store = InMemorySessionStore()
    kept = [store.create(str(i), Role.CHEF_BRIGADE, brigade_id=1) for i in range(100)]

    def login_logout(i):
        token = store.create(f"tmp-{i}", Role.CHEF_SECTION)
        assert store.lookup(token).subject_id == f"tmp-{i}"
        store.invalidate(token)
        return token

    with ThreadPoolExecutor(max_workers=8) as pool:
        removed = list(pool.map(login_logout, range(400)))

    assert all(store.lookup(t) is None for t in removed)
    assert [store.lookup(t).subject_id for t in kept] == [str(i) for i in range(100)]
    assert len(store) == 100


def test_cookie_codec_writes_httponly_cookie_scoped_to_root_path():
    codec = SessionCookieCodec(cookie_name="session_token", max_age=86400)
    response = Response()
    codec.write(response, "abc")
    header = response.headers["set-cookie"].lower()
    assert header.startswith("session_token=abc")
    assert "httponly" in header
    assert "path=/" in header
    assert "samesite=lax" in header
    assert "max-age=86400" in header


def test_cookie_codec_clear_sets_empty_value_and_zero_lifetime():
    codec = SessionCookieCodec(cookie_name="session_token")
    response = Response()
    codec.clear(response)
    header = response.headers["set-cookie"].lower()
    assert header.startswith('session_token=""') or header.startswith("session_token=;")
    assert "max-age=0" in header
    assert "path=/" in header
