"""
Password hashing.

Secrets are stored as argon2id hashes. Verification goes through argon2's
constant-time comparison, and unknown usernames are checked against a dummy
hash so both sign-in failure paths cost about the same.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher()

_DUMMY_HASH = _hasher.hash("accounts-dummy-password")


def hash_password(password: str) -> str:
    """Generate a salted argon2id hash of a password."""
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Check a password against a stored hash."""
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def verify_dummy_password(password: str) -> None:
    """Spend the same work as a real verification; the result is discarded."""
    verify_password(_DUMMY_HASH, password)
