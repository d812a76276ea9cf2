"""Password hashing utilities."""

import bcrypt

# bcrypt only looks at the first 72 bytes of a secret
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        bcrypt digest as a string (salt embedded)
    """
    digest = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds))
    return digest.decode("utf-8")


def verify_password(password: str, digest: str) -> bool:
    """Check a password against a stored digest.

    Args:
        password: Plain-text password
        digest: Stored bcrypt digest

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(_encode(password), digest.encode("utf-8"))
    except ValueError:
        # Malformed digest
        return False
