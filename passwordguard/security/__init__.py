"""
Security module for the application.

This module wires the password policy core into the application:
- PasswordGuard: per-request policy snapshot, hook chain, enforcement
- SecurityLogger: audit logging of policy events
"""

from .password_check import PasswordGuard, get_guard
from .security_logger import SecurityLogger
from .security_init import init_security

__all__ = [
    'PasswordGuard',
    'get_guard',
    'SecurityLogger',
    'init_security',
]
