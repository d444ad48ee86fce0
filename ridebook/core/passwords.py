"""bcrypt wrappers used wherever account passwords are stored or checked.

Hashing is CPU bound, so both calls are pushed onto Starlette's threadpool and
awaited. No policy (minimum length and so on) lives here.
"""

from __future__ import annotations

from typing import Protocol

import bcrypt
from starlette.concurrency import run_in_threadpool

from .config import settings

# bcrypt only reads the first 72 bytes; newer releases refuse longer input.
MAX_PASSWORD_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class Hasher(Protocol):
    async def hash(self, password: str) -> str: ...

    async def compare(self, plain: str, hashed: str) -> bool: ...


class BcryptHasher:
    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = rounds if rounds is not None else settings.BCRYPT_ROUNDS

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_secret(password), salt).decode("utf-8")

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self._hash_sync, password)

    async def compare(self, plain: str, hashed: str) -> bool:
        return await run_in_threadpool(bcrypt.checkpw, _secret(plain), hashed.encode("utf-8"))


default_hasher = BcryptHasher()


async def hash_password(password: str) -> str:
    return await default_hasher.hash(password)


async def compare_password(plain: str, hashed: str) -> bool:
    return await default_hasher.compare(plain, hashed)
