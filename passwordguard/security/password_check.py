"""
Password check pathway.

PasswordGuard is installed on the Flask app as an extension. It builds a
fresh policy snapshot for every check, runs the hook chain, and applies
the enforcement mode.
"""

from typing import Mapping, Optional

from flask import Flask, current_app

from passwordguard.config import Config
from passwordguard.policy.enforcement import enforce_verdict
from passwordguard.policy.hooks import (
    CheckPasswordHooks,
    PasswordType,
    check_password,
    get_password_type,
)
from passwordguard.policy.models import PolicyConfig, Verdict
from passwordguard.policy.settings import build_policy_config
from .security_logger import SecurityLogger


EXTENSION_NAME = "passwordguard"


class PasswordGuard:
    """
    Runs password checks for credential changes.

    Args:
        app_config: Application configuration holding the global policy
        hooks: Hook chain; defaults to the built-in checker only
    """

    def __init__(self, app_config: Config, hooks: Optional[CheckPasswordHooks] = None):
        self.app_config = app_config
        if hooks is None:
            hooks = CheckPasswordHooks([check_password])
        self.hooks = hooks

    @property
    def report_all(self) -> bool:
        return self.app_config.PASSWORDGUARD_REPORT_ALL

    def global_settings(self) -> dict:
        return self.app_config.policy_settings()

    def policy_for(self, overrides: Optional[Mapping[str, str]] = None) -> PolicyConfig:
        """Snapshot of the global policy with per-role overrides applied."""
        return build_policy_config(self.global_settings(), overrides)

    def evaluate(self, role_name: Optional[str], password: Optional[str],
                 config: PolicyConfig) -> Verdict:
        """Run the hook chain without enforcing anything."""
        if password is None:
            return Verdict()
        return self.hooks.run(role_name, password, get_password_type(password), config)

    def check(self, role_name: str, password: Optional[str],
              overrides: Optional[Mapping[str, str]] = None) -> PasswordType:
        """
        Check a password presented for a create/alter operation.

        Args:
            role_name: Role being created or altered
            password: New password; None clears it and is never checked
            overrides: Per-role setting overrides for the role

        Returns:
            Detected password type, so the caller knows whether to hash it

        Raises:
            PasswordPolicyError: rejected in enforcing mode
        """
        if password is None:
            return PasswordType.PLAINTEXT

        password_type = get_password_type(password)
        if password_type is not PasswordType.PLAINTEXT:
            SecurityLogger.log_check_skipped(role_name, password_type)

        config = self.policy_for(overrides)
        verdict = self.hooks.run(role_name, password, password_type, config)

        if not verdict.accepted and not config.log_only:
            SecurityLogger.log_password_rejected(role_name, verdict)

        enforce_verdict(
            verdict,
            config,
            report_all=self.report_all,
            warn=lambda violation: SecurityLogger.log_policy_violation(role_name, violation),
        )
        return password_type

    def init_app(self, app: Flask) -> None:
        app.extensions[EXTENSION_NAME] = self


def get_guard() -> PasswordGuard:
    """Return the PasswordGuard installed on the current app."""
    return current_app.extensions[EXTENSION_NAME]
