"""
Security logging module.

This module provides specialized logging for password policy events:
warnings raised in log-only mode, rejected passwords, skipped checks and
credential changes. Passwords themselves are never written to the log.
"""

from flask import current_app

from passwordguard.policy.models import Verdict, Violation


class SecurityLogger:
    """
    Password policy event logger.

    Logs policy-related events for monitoring and auditing.
    """

    @staticmethod
    def log_policy_violation(role_name: str, violation: Violation):
        """
        Log one violation that was allowed through (log-only mode).

        Args:
            role_name: Role whose password was checked
            violation: The broken rule
        """
        current_app.logger.warning(
            f"PASSWORDGUARD: {violation.log_message} - Role: {role_name}"
        )

    @staticmethod
    def log_password_rejected(role_name: str, verdict: Verdict):
        """
        Log a password rejected in enforcing mode.

        Args:
            role_name: Role whose password was checked
            verdict: Full verdict, including violations not sent to the client
        """
        current_app.logger.info(
            f"PASSWORDGUARD: Password rejected - Role: {role_name}, "
            f"Violations: {', '.join(verdict.codes())}"
        )

    @staticmethod
    def log_check_skipped(role_name: str, password_type):
        current_app.logger.debug(
            f"PASSWORDGUARD: skipping non-plaintext password - Role: {role_name}, "
            f"Type: {password_type.value}"
        )

    @staticmethod
    def log_password_change(role_name: str, action: str):
        """
        Log a successful credential change.

        Args:
            role_name: Role name
            action: 'created', 'changed' or 'cleared'
        """
        current_app.logger.info(
            f"PASSWORDGUARD: Password {action} - Role: {role_name}"
        )

    @staticmethod
    def log_setting_change(role_name: str, option: str, value=None):
        if value is None:
            current_app.logger.info(
                f"PASSWORDGUARD: Setting reset - Role: {role_name}, Option: {option}"
            )
        else:
            current_app.logger.info(
                f"PASSWORDGUARD: Setting changed - Role: {role_name}, "
                f"Option: {option}, Value: {value}"
            )
