"""Password hashing tests."""

import pytest

from mentorhub.auth.password import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)
from mentorhub.config import settings


def test_hash_and_verify():
    digest = hash_password("correct horse")
    assert digest.startswith("$2b$")
    assert verify_password("correct horse", digest)
    assert not verify_password("wrong horse", digest)


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_work_factor_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "bcrypt_rounds", 5)
    assert hash_password("pw").startswith("$2b$05$")


def test_default_work_factor_is_10(monkeypatch):
    from mentorhub.config import Settings

    monkeypatch.delenv("MENTORHUB_BCRYPT_ROUNDS", raising=False)
    assert Settings(_env_file=None).bcrypt_rounds == 10


@pytest.mark.parametrize("bad_hash", ["", "plaintext", "$2b$10$tooshort"])
def test_malformed_hash_never_matches(bad_hash):
    assert verify_password("anything", bad_hash) is False


def test_long_passwords_truncated_to_72_bytes():
    base = "x" * 72
    digest = hash_password(base + "tail-one")
    assert verify_password(base + "tail-two", digest)


@pytest.mark.asyncio
async def test_async_wrappers():
    digest = await hash_password_async("pw_async")
    assert await verify_password_async("pw_async", digest)
    assert not await verify_password_async("nope", digest)
