"""
Check-password hook chain.

Hooks are plain callables taking (username, password, password_type,
config) and returning a Verdict (or None for "nothing to report").
CheckPasswordHooks runs them in registration order and merges the
results, so other checkers can be installed alongside the built-in one.
"""

import enum
import re
from typing import Callable, List, Optional

from .evaluator import evaluate
from .models import PolicyConfig, Verdict


_MD5_RE = re.compile(r"md5[0-9a-f]{32}")
_SCRAM_RE = re.compile(
    r"SCRAM-SHA-256\$([0-9]+):([A-Za-z0-9+/=]+)\$([A-Za-z0-9+/=]+):([A-Za-z0-9+/=]+)"
)


class PasswordType(enum.Enum):
    PLAINTEXT = "plaintext"
    MD5 = "md5"
    SCRAM_SHA_256 = "scram-sha-256"


def get_password_type(password: str) -> PasswordType:
    """
    Detect whether a supplied password is already encrypted.

    Clients may send a pre-computed md5 or SCRAM verifier instead of the
    plaintext; those cannot be inspected and are stored as given.
    """
    if _MD5_RE.fullmatch(password):
        return PasswordType.MD5
    if _SCRAM_RE.fullmatch(password):
        return PasswordType.SCRAM_SHA_256
    return PasswordType.PLAINTEXT


Hook = Callable[[Optional[str], Optional[str], PasswordType, PolicyConfig], Optional[Verdict]]


def check_password(username: Optional[str], password: Optional[str],
                   password_type: PasswordType, config: PolicyConfig) -> Verdict:
    """Built-in hook: only plaintext passwords are evaluated."""
    if password_type is not PasswordType.PLAINTEXT:
        return Verdict()
    return evaluate(username, password, config)


class CheckPasswordHooks:
    """Ordered list of password checkers."""

    def __init__(self, hooks: Optional[List[Hook]] = None):
        self._hooks: List[Hook] = list(hooks or [])

    def register(self, hook: Hook) -> Hook:
        """
        Append a hook. It runs after every hook registered before it.

        Returns the hook so this can be used as a decorator.
        """
        self._hooks.append(hook)
        return hook

    @property
    def hooks(self) -> List[Hook]:
        return list(self._hooks)

    def run(self, username: Optional[str], password: Optional[str],
            password_type: PasswordType, config: PolicyConfig) -> Verdict:
        verdict = Verdict()
        for hook in self._hooks:
            result = hook(username, password, password_type, config)
            if result is not None:
                verdict = verdict.merge(result)
        return verdict

    def __len__(self) -> int:
        return len(self._hooks)
