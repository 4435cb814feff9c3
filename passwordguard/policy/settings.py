"""
Policy option registry.

Each tunable is described once here: its type, default, allowed range and
help text. Values coming from the environment or from per-role overrides
are parsed through parse_option_value() so both paths accept the same
spellings.
"""

from typing import Any, Dict, Mapping, NamedTuple, Optional

from .models import PolicyConfig


OPTION_PREFIX = "passwordguard"
INT_MAX = 2147483647

_TRUE_WORDS = ("on", "true", "yes", "1")
_FALSE_WORDS = ("off", "false", "no", "0")


class SettingError(ValueError):
    """Base class for rejected policy settings."""


class UnknownSettingError(SettingError):
    def __init__(self, name: str):
        super().__init__(f'unrecognized configuration parameter "{OPTION_PREFIX}.{name}"')
        self.name = name


class InvalidSettingError(SettingError):
    def __init__(self, name: str, value: Any, hint: str):
        super().__init__(
            f'invalid value for parameter "{OPTION_PREFIX}.{name}": "{value}" ({hint})'
        )
        self.name = name
        self.value = value


class PolicyOption(NamedTuple):
    name: str
    kind: type
    default: Any
    short_desc: str
    long_desc: Optional[str] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    @property
    def qualified_name(self) -> str:
        return f"{OPTION_PREFIX}.{self.name}"

    def describe(self, value: Any) -> dict:
        info = {
            "name": self.qualified_name,
            "type": "integer" if self.kind is int else "boolean",
            "value": value,
            "default": self.default,
            "description": self.short_desc,
        }
        if self.long_desc:
            info["details"] = self.long_desc
        if self.kind is int:
            info["min"] = self.minimum
            info["max"] = self.maximum
        return info


OPTIONS: Dict[str, PolicyOption] = {
    opt.name: opt
    for opt in (
        PolicyOption(
            "min_length", int, 12,
            "Minimum allowed password length.",
            minimum=0, maximum=INT_MAX,
        ),
        PolicyOption(
            "require_upper", bool, True,
            "Require at least one uppercase letter in passwords.",
        ),
        PolicyOption(
            "require_lower", bool, True,
            "Require at least one lowercase letter in passwords.",
        ),
        PolicyOption(
            "require_digit", bool, True,
            "Require at least one digit in passwords.",
        ),
        PolicyOption(
            "require_special", bool, True,
            "Require at least one special (non-alphanumeric) character in passwords.",
        ),
        PolicyOption(
            "reject_username", bool, True,
            "Reject passwords that contain the username (case-insensitive).",
        ),
        PolicyOption(
            "log_only", bool, False,
            "Log policy violations but do not reject the password.",
            "Useful for testing impact before enforcing the policy.",
        ),
    )
}


def normalize_option_name(name: str) -> str:
    """Strip an optional 'passwordguard.' prefix and validate the name."""
    key = (name or "").strip().lower()
    prefix = OPTION_PREFIX + "."
    if key.startswith(prefix):
        key = key[len(prefix):]
    if key not in OPTIONS:
        raise UnknownSettingError(key or name)
    return key


def parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word:
            # Unique prefixes count: "t" is true, "o" matches both on and off
            true_hits = [w for w in _TRUE_WORDS if w.startswith(word)]
            false_hits = [w for w in _FALSE_WORDS if w.startswith(word)]
            if true_hits and not false_hits:
                return True
            if false_hits and not true_hits:
                return False
    raise InvalidSettingError(name, raw, "requires a Boolean value")


def _parse_int(option: PolicyOption, raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidSettingError(option.name, raw, "requires an integer value")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        # int() also takes "1_000" and non-ASCII digits
        if not text.isascii() or "_" in text:
            raise InvalidSettingError(option.name, raw, "requires an integer value")
        try:
            value = int(text, 10)
        except ValueError:
            raise InvalidSettingError(option.name, raw, "requires an integer value")
    else:
        raise InvalidSettingError(option.name, raw, "requires an integer value")

    if option.minimum is not None and value < option.minimum:
        raise InvalidSettingError(
            option.name, raw, f"must be between {option.minimum} and {option.maximum}"
        )
    if option.maximum is not None and value > option.maximum:
        raise InvalidSettingError(
            option.name, raw, f"must be between {option.minimum} and {option.maximum}"
        )
    return value


def parse_option_value(name: str, raw: Any) -> Any:
    """
    Parse a raw setting into the option's native type.

    Args:
        name: Option name, with or without the 'passwordguard.' prefix
        raw: Native value or string as found in the environment / database

    Returns:
        Parsed int or bool

    Raises:
        UnknownSettingError: name is not a policy option
        InvalidSettingError: value cannot be parsed or is out of range
    """
    key = normalize_option_name(name)
    option = OPTIONS[key]
    if option.kind is bool:
        return parse_bool(key, raw)
    return _parse_int(option, raw)


def format_option_value(value: Any) -> str:
    """Render a parsed value the way it is stored in role_settings."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def default_settings() -> Dict[str, Any]:
    return {name: opt.default for name, opt in OPTIONS.items()}


def build_policy_config(base: Optional[Mapping[str, Any]] = None,
                        overrides: Optional[Mapping[str, Any]] = None) -> PolicyConfig:
    """
    Build a PolicyConfig snapshot from layered settings.

    Defaults come first, then base (global values), then overrides
    (per-role values). Raw strings are parsed, so stored override rows can
    be passed in directly.
    """
    values = default_settings()
    for layer in (base, overrides):
        for name, raw in (layer or {}).items():
            key = normalize_option_name(name)
            values[key] = parse_option_value(key, raw)
    return PolicyConfig(**values)
