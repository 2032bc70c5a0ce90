# jobly/services/passwords.py
from jobly.extensions import bcrypt


def hash_password(plaintext):
    """Salted bcrypt hash using the configured BCRYPT_LOG_ROUNDS work factor."""
    return bcrypt.generate_password_hash(plaintext).decode("utf-8")


def verify_password(plaintext, hashed):
    """Check ``plaintext`` against a stored hash.

    A malformed stored hash counts as a mismatch rather than an error.
    """
    if not plaintext or not hashed:
        return False
    try:
        return bcrypt.check_password_hash(hashed, plaintext)
    except (TypeError, ValueError):
        return False
