"""Password hashing helpers backed by bcrypt."""

from __future__ import annotations

from functools import lru_cache

import bcrypt
from flask import current_app, has_app_context

DEFAULT_ROUNDS = 12
# bcrypt only consumes the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _rounds() -> int:
    if has_app_context():
        return int(current_app.config.get("BCRYPT_ROUNDS", DEFAULT_ROUNDS))
    return DEFAULT_ROUNDS


def hash_password(plain: str, *, rounds: int | None = None) -> str:
    """
    Hash a password with a fresh salt.

    :param plain: Plain text password.
    :param rounds: Cost factor; defaults to ``BCRYPT_ROUNDS`` from the app config.
    :returns: Modular-crypt bcrypt hash as text.
    :rtype: str
    """
    salt = bcrypt.gensalt(rounds=rounds or _rounds())
    return bcrypt.hashpw(_encode(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    """
    Check a password against a stored hash in constant time.

    :param plain: Candidate password.
    :param hashed: Stored bcrypt hash (``None``/empty never matches).
    :returns: ``True`` on match.
    :rtype: bool
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


@lru_cache(maxsize=8)
def _dummy_hash(rounds: int) -> str:
    return hash_password("catalog-timing-placeholder", rounds=rounds)


def verify_dummy_password(plain: str) -> bool:
    """
    Run a bcrypt check against a throwaway hash at the configured cost.

    Used when no account matches, so a failed login costs the same time
    whether or not the email is registered.

    :param plain: Candidate password.
    :returns: Always ``False``.
    :rtype: bool
    """
    verify_password(plain or "-", _dummy_hash(_rounds()))
    return False
