"""
Password policy evaluation.

evaluate() is a pure function: no I/O, no logging and no shared state.
Every enabled rule is always checked so that log-only callers can report
all problems at once; enforcing callers decide how much of the verdict
to surface.
"""

from typing import List, NamedTuple, Optional

from .models import (
    ContainsUsername,
    MissingDigit,
    MissingLowercase,
    MissingSpecial,
    MissingUppercase,
    PolicyConfig,
    TooShort,
    Verdict,
    Violation,
)


# Folds A-Z only; str.lower() would also fold non-ASCII letters.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class CharacterClasses(NamedTuple):
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_special: bool


def ascii_lower(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def scan_character_classes(password: str) -> CharacterClasses:
    """
    Classify every character of the password in a single pass.

    Each character lands in exactly one bucket. Anything that is not an
    ASCII letter or digit (whitespace, punctuation, non-ASCII) is special.
    """
    has_upper = has_lower = has_digit = has_special = False

    for char in password:
        if "A" <= char <= "Z":
            has_upper = True
        elif "a" <= char <= "z":
            has_lower = True
        elif "0" <= char <= "9":
            has_digit = True
        else:
            has_special = True

    return CharacterClasses(has_upper, has_lower, has_digit, has_special)


def contains_username(password: str, username: Optional[str]) -> bool:
    """Case-insensitive (ASCII) substring test. Empty usernames never match."""
    if not username:
        return False
    return ascii_lower(username) in ascii_lower(password)


def evaluate(username: Optional[str], password: Optional[str],
             config: PolicyConfig) -> Verdict:
    """
    Evaluate a plaintext password against the policy.

    Args:
        username: Role name the password belongs to, or None
        password: Candidate plaintext password; None means the password
            is being cleared and there is nothing to check
        config: Policy snapshot to evaluate against

    Returns:
        Verdict with violations in rule order: length, uppercase,
        lowercase, digit, special, username
    """
    if password is None:
        return Verdict()

    violations: List[Violation] = []

    # Byte length of the UTF-8 encoding, so "é" counts as two
    length = len(password.encode("utf-8", "surrogatepass"))
    if length < config.min_length:
        violations.append(TooShort(actual=length, required=config.min_length))

    classes = scan_character_classes(password)

    if config.require_upper and not classes.has_upper:
        violations.append(MissingUppercase())
    if config.require_lower and not classes.has_lower:
        violations.append(MissingLowercase())
    if config.require_digit and not classes.has_digit:
        violations.append(MissingDigit())
    if config.require_special and not classes.has_special:
        violations.append(MissingSpecial())

    if config.reject_username and contains_username(password, username):
        violations.append(ContainsUsername())

    return Verdict(violations)
