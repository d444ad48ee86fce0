import asyncio

import pytest

from ridebook.core.passwords import BcryptHasher, compare_password, hash_password


def test_hash_then_compare_round_trip():
    async def scenario():
        hashed = await hash_password("s3cret-pass")
        return hashed, await compare_password("s3cret-pass", hashed)

    hashed, matches = asyncio.run(scenario())

    assert matches is True
    assert hashed != "s3cret-pass"
    # bcrypt encodes the cost factor in the hash prefix.
    assert hashed.startswith("$2b$10$")


def test_compare_rejects_other_password():
    async def scenario():
        return await compare_password("s3cret-pass", await hash_password("other"))

    assert asyncio.run(scenario()) is False


def test_hashes_are_salted():
    async def scenario():
        return await hash_password("same"), await hash_password("same")

    first, second = asyncio.run(scenario())

    assert first != second


def test_custom_rounds():
    hasher = BcryptHasher(rounds=4)

    hashed = asyncio.run(hasher.hash("pw"))

    assert hashed.startswith("$2b$04$")
    assert asyncio.run(hasher.compare("pw", hashed)) is True


def test_compare_with_malformed_hash_raises():
    with pytest.raises(ValueError):
        asyncio.run(compare_password("pw", "not-a-bcrypt-hash"))


def test_long_password_round_trip():
    passphrase = "correct horse battery staple " * 4  # 116 characters

    async def scenario():
        hashed = await hash_password(passphrase)
        return await compare_password(passphrase, hashed)

    assert len(passphrase.encode("utf-8")) > 72
    assert asyncio.run(scenario()) is True


def test_long_multibyte_password_round_trip():
    passphrase = "æøå" * 30  # two bytes per character

    async def scenario():
        hashed = await hash_password(passphrase)
        return await compare_password(passphrase, hashed), await compare_password("æøå", hashed)

    matches, short_matches = asyncio.run(scenario())

    assert matches is True
    assert short_matches is False
