"""
Security initialization module.

This module installs the password policy checker on the Flask application
and maps policy errors to JSON responses.
"""

from flask import Flask, jsonify

from passwordguard.config import Config
from passwordguard.policy.enforcement import PasswordPolicyError
from passwordguard.policy.settings import SettingError
from .password_check import PasswordGuard


def init_security(app: Flask, app_config: Config) -> PasswordGuard:
    """
    Initialize password policy enforcement for the Flask app.

    Args:
        app: Flask application instance
        app_config: Loaded application configuration

    Returns:
        The installed PasswordGuard, so callers can register extra hooks
    """
    guard = PasswordGuard(app_config)
    guard.init_app(app)

    @app.errorhandler(PasswordPolicyError)
    def handle_policy_error(error):
        return jsonify(error.to_dict()), 400

    @app.errorhandler(SettingError)
    def handle_setting_error(error):
        return jsonify({"message": str(error)}), 400

    policy = app_config.policy_config()
    app.logger.info(
        f"Password policy initialized (min_length={policy.min_length}, "
        f"log_only={'on' if policy.log_only else 'off'})"
    )
    return guard
