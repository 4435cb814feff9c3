import re

from passlib.hash import pbkdf2_sha256

from passwordguard.policy.hooks import PasswordType


ROLE_NAME_REGEX = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]{0,62}$")


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password for storage."""
    return pbkdf2_sha256.hash(plain_password)


def stored_password(password: str, password_type: PasswordType) -> str:
    """
    Value to persist for a new password.

    Plaintext is hashed; md5/SCRAM verifiers supplied by the client are
    already encrypted and are kept as they are.
    """
    if password_type is PasswordType.PLAINTEXT:
        return hash_password(password)
    return password


def is_valid_role_name(name: str) -> bool:
    return bool(name and ROLE_NAME_REGEX.match(name))
