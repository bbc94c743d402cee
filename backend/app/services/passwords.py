"""
Hauge API — Password Hashing
=============================

Thin wrapper over a passlib CryptContext. Plaintext passwords exist only in
memory during request processing and are never logged.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except ValueError:
        # Unrecognised or corrupt hash in the database
        logger.warning("Stored password hash could not be identified")
        return False
