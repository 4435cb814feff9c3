"""
Turning a verdict into an outcome.

In log-only mode every violation is handed to a warning callback and the
operation goes ahead. Otherwise a PasswordPolicyError is raised.
"""

from typing import Callable, Iterable, Optional

from .models import PolicyConfig, Verdict, Violation


class PasswordPolicyError(Exception):
    """Raised when a password is rejected in enforcing mode."""

    message = "password does not meet complexity requirements"

    def __init__(self, violations: Iterable[Violation]):
        self.violations = tuple(violations)
        super().__init__(self.message)

    @property
    def detail(self) -> str:
        return " ".join(v.detail for v in self.violations)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "detail": self.detail,
            "violations": [v.to_dict() for v in self.violations],
        }


def enforce_verdict(verdict: Verdict, config: PolicyConfig, *,
                    report_all: bool = False,
                    warn: Optional[Callable[[Violation], None]] = None) -> None:
    """
    Apply the enforcement mode to a verdict.

    Args:
        verdict: Result of evaluating the password
        config: Policy snapshot the verdict was produced with
        report_all: Put every violation in the error instead of the first
        warn: Called once per violation in log-only mode

    Raises:
        PasswordPolicyError: verdict is non-empty and log_only is off
    """
    if verdict.accepted:
        return

    if config.log_only:
        if warn is not None:
            for violation in verdict:
                warn(violation)
        return

    if report_all:
        raise PasswordPolicyError(verdict.violations)
    raise PasswordPolicyError([verdict.first])
