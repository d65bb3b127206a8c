import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from sehra.client.session import Session, SessionStore, token_expired
from sehra.domain.entities import PackageTier, UserRole


def _jwt(expires: datetime) -> str:
    return jwt.encode({"sub": "asha@example.com", "exp": int(expires.timestamp())}, "k", algorithm="HS256")


def _session(token: str = "opaque-token", package: PackageTier | None = None) -> Session:
    return Session(
        user_id=3,
        role=UserRole.BRIDE,
        token=token,
        package_tier=package,
        name="Asha",
        email="asha@example.com",
    )


def test_load_without_file_returns_none(tmp_path) -> None:
    store = SessionStore(tmp_path / "session.json")
    assert store.loaded is False
    assert store.load() is None
    assert store.loaded is True
    assert store.current() is None


def test_save_then_load_in_a_new_store(tmp_path) -> None:
    path = tmp_path / "nested" / "session.json"
    saved = SessionStore(path).save(_session(package=PackageTier.GOLD))

    restored = SessionStore(path).load()

    assert restored == saved
    assert restored.has_package is True
    assert json.loads(path.read_text())["user"]["package"] == "Gold"
    assert [p.name for p in path.parent.iterdir()] == ["session.json"]


def test_malformed_document_is_discarded(tmp_path) -> None:
    path = tmp_path / "session.json"
    path.write_text('{"token": "abc"')

    assert SessionStore(path).load() is None
    assert not path.exists()


def test_document_without_user_is_discarded(tmp_path) -> None:
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"token": "abc"}))

    assert SessionStore(path).load() is None
    assert not path.exists()


def test_expired_token_is_discarded(tmp_path) -> None:
    path = tmp_path / "session.json"
    store = SessionStore(path)
    store.save(_session(token=_jwt(datetime.now(tz=timezone.utc) - timedelta(minutes=5))))

    assert SessionStore(path).load() is None
    assert not path.exists()


def test_unexpired_jwt_is_kept(tmp_path) -> None:
    path = tmp_path / "session.json"
    token = _jwt(datetime.now(tz=timezone.utc) + timedelta(hours=1))
    SessionStore(path).save(_session(token=token))

    assert SessionStore(path).load().token == token


def test_token_expired_ignores_opaque_tokens() -> None:
    assert token_expired("not-a-jwt") is False
    past = datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert token_expired(_jwt(past)) is True
    assert token_expired(_jwt(past), now=past - timedelta(seconds=1)) is False


def test_update_and_clear(tmp_path) -> None:
    path = tmp_path / "session.json"
    store = SessionStore(path)
    store.save(_session())

    updated = store.update(package_tier=PackageTier.PLATINUM)
    assert updated.package_tier is PackageTier.PLATINUM
    assert SessionStore(path).load().package_tier is PackageTier.PLATINUM

    store.clear()
    assert store.current() is None
    assert not path.exists()


def test_update_without_session_fails(tmp_path) -> None:
    store = SessionStore(tmp_path / "session.json")
    with pytest.raises(ValueError, match="No active session"):
        store.update(name="x")


def test_staff_roles_count_as_having_a_package() -> None:
    vendor = Session(user_id=1, role=UserRole.VENDOR, token="t")
    groom = Session(user_id=2, role=UserRole.GROOM, token="t")
    assert vendor.has_package is True
    assert groom.has_package is False


def test_from_payload_parses_role_and_package_case_insensitively() -> None:
    session = Session.from_payload(
        {"token": "t", "user": {"id": 4, "role": "Groom", "package": "silver"}}
    )
    assert session.role is UserRole.GROOM
    assert session.package_tier is PackageTier.SILVER
