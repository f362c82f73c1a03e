"""Password hashing helpers (bcrypt, per-hash random salt).

bcrypt only accepts 72 bytes of input, so passwords are first reduced to a
fixed-length SHA-256 digest (base64, no NUL bytes) before hashing.
"""
import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
