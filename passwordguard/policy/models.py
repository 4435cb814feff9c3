"""
Policy value types.

PolicyConfig is an immutable snapshot of the password tunables,
Violation is one broken rule and Verdict is the ordered result of a
single evaluation.
"""

import dataclasses
from dataclasses import asdict, dataclass, fields
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class PolicyConfig:
    """
    Immutable snapshot of the password policy settings.

    log_only does not change how passwords are classified; it only tells
    the caller whether a non-empty verdict should block the operation.
    """

    min_length: int = 12
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True
    reject_username: bool = True
    log_only: bool = False

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")

    def replace(self, **changes) -> "PolicyConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class Violation:
    """Base class for a single broken password rule."""

    code = "violation"

    @property
    def detail(self) -> str:
        """Client-facing explanation of the rule."""
        raise NotImplementedError

    @property
    def log_message(self) -> str:
        """Short text used for warning log lines."""
        raise NotImplementedError

    def to_dict(self) -> dict:
        data = {"code": self.code, "detail": self.detail}
        data.update(asdict(self))
        return data


@dataclass(frozen=True)
class TooShort(Violation):
    actual: int
    required: int

    code = "too_short"

    @property
    def detail(self) -> str:
        return f"Password must be at least {self.required} characters long."

    @property
    def log_message(self) -> str:
        return f"password too short (len={self.actual}, min={self.required})"


@dataclass(frozen=True)
class MissingUppercase(Violation):
    code = "missing_uppercase"

    @property
    def detail(self) -> str:
        return "Password must contain at least one uppercase letter."

    @property
    def log_message(self) -> str:
        return "missing uppercase letter"


@dataclass(frozen=True)
class MissingLowercase(Violation):
    code = "missing_lowercase"

    @property
    def detail(self) -> str:
        return "Password must contain at least one lowercase letter."

    @property
    def log_message(self) -> str:
        return "missing lowercase letter"


@dataclass(frozen=True)
class MissingDigit(Violation):
    code = "missing_digit"

    @property
    def detail(self) -> str:
        return "Password must contain at least one digit."

    @property
    def log_message(self) -> str:
        return "missing digit"


@dataclass(frozen=True)
class MissingSpecial(Violation):
    code = "missing_special"

    @property
    def detail(self) -> str:
        return "Password must contain at least one special character."

    @property
    def log_message(self) -> str:
        return "missing special character"


@dataclass(frozen=True)
class ContainsUsername(Violation):
    code = "contains_username"

    @property
    def detail(self) -> str:
        return "Password must not contain the username."

    @property
    def log_message(self) -> str:
        return "password contains username"


class Verdict:
    """
    Ordered, immutable collection of violations.

    An empty verdict means the password was accepted.
    """

    __slots__ = ("_violations",)

    def __init__(self, violations=()):
        self._violations: Tuple[Violation, ...] = tuple(violations)

    @property
    def violations(self) -> Tuple[Violation, ...]:
        return self._violations

    @property
    def accepted(self) -> bool:
        return not self._violations

    @property
    def first(self) -> Optional[Violation]:
        return self._violations[0] if self._violations else None

    def merge(self, other: "Verdict") -> "Verdict":
        """Return a verdict holding this verdict's violations followed by other's."""
        return Verdict(self._violations + other.violations)

    def codes(self) -> List[str]:
        return [v.code for v in self._violations]

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "violations": [v.to_dict() for v in self._violations],
        }

    def __iter__(self) -> Iterator[Violation]:
        return iter(self._violations)

    def __len__(self) -> int:
        return len(self._violations)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self._violations == other.violations

    def __hash__(self) -> int:
        return hash(self._violations)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Verdict {list(self._violations)!r}>"
