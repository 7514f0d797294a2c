"""Salt generation and PBKDF2 password hashing.

Stored hashes are base64 PBKDF2-HMAC-SHA1 digests (10,000 rounds, 32 bytes)
keyed by a short per-user salt string.
"""

import base64
import hashlib
import hmac
import secrets

DEFAULT_SALT_SIZE = 5
HASH_ITERATIONS = 10_000
HASH_LENGTH = 32
HASH_ALGORITHM = "sha1"


def generate_salt(size: int = DEFAULT_SALT_SIZE) -> str:
    # Encoded then truncated to `size` characters, so the salt carries fewer
    # than `size` bytes of entropy. Existing stored hashes depend on this shape.
    buffer = secrets.token_bytes(size)
    return base64.b64encode(buffer).decode("ascii")[:size]


def hash_password(password: str, salt: str) -> str:
    derived = hashlib.pbkdf2_hmac(
        HASH_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        HASH_ITERATIONS,
        dklen=HASH_LENGTH,
    )
    return base64.b64encode(derived).decode("ascii")


def verify_password(entered_password: str, stored_hash: str, stored_salt: str) -> bool:
    candidate = hash_password(entered_password, stored_salt)
    return hmac.compare_digest(candidate.encode("ascii"), (stored_hash or "").encode("utf-8"))
