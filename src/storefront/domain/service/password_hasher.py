"""Password hashing with bcrypt.

Hashes are stored in the standard ``$2b$<cost>$...`` form, so the cost
factor travels with each hash and can be raised without invalidating old
ones.
"""

from __future__ import annotations

import bcrypt

ROUNDS = 12

# bcrypt only looks at the first 72 bytes of a secret.
_MAX_SECRET_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_SECRET_BYTES]


def hash_password(password: str, rounds: int = ROUNDS) -> str:
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds)).decode("ascii")


def verify_password(password: str, encoded: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), encoded.encode("ascii"))
    except ValueError:
        # Malformed or non-bcrypt hash.
        return False
