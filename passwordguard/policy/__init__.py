"""
Password policy core.

This package has no framework dependencies: it classifies passwords and
leaves logging, storage and HTTP handling to the caller.
"""

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
from .evaluator import evaluate, scan_character_classes
from .settings import (
    OPTIONS,
    InvalidSettingError,
    SettingError,
    UnknownSettingError,
    build_policy_config,
    parse_option_value,
)
from .hooks import CheckPasswordHooks, PasswordType, check_password, get_password_type
from .enforcement import PasswordPolicyError, enforce_verdict

__all__ = [
    'PolicyConfig',
    'Verdict',
    'Violation',
    'TooShort',
    'MissingUppercase',
    'MissingLowercase',
    'MissingDigit',
    'MissingSpecial',
    'ContainsUsername',
    'evaluate',
    'scan_character_classes',
    'OPTIONS',
    'SettingError',
    'UnknownSettingError',
    'InvalidSettingError',
    'build_policy_config',
    'parse_option_value',
    'CheckPasswordHooks',
    'PasswordType',
    'check_password',
    'get_password_type',
    'PasswordPolicyError',
    'enforce_verdict',
]
