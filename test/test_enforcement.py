"""
Test cases for applying the enforcement mode to a verdict.
"""
import pytest

from passwordguard.policy import (
    ContainsUsername,
    MissingDigit,
    PasswordPolicyError,
    TooShort,
    Verdict,
    enforce_verdict,
    evaluate,
)


class TestEnforceVerdict:
    """Test cases for enforce_verdict."""

    def test_accepted_verdict_passes(self, policy):
        warnings = []
        enforce_verdict(Verdict(), policy, warn=warnings.append)
        assert warnings == []

    def test_enforcing_raises_first_violation(self, policy):
        verdict = evaluate("ab", "xab", policy)
        with pytest.raises(PasswordPolicyError) as exc_info:
            enforce_verdict(verdict, policy)
        error = exc_info.value
        assert str(error) == "password does not meet complexity requirements"
        assert error.violations == (TooShort(actual=3, required=8),)
        assert error.detail == "Password must be at least 8 characters long."

    def test_report_all(self, policy):
        verdict = Verdict([MissingDigit(), ContainsUsername()])
        with pytest.raises(PasswordPolicyError) as exc_info:
            enforce_verdict(verdict, policy, report_all=True)
        assert exc_info.value.violations == verdict.violations
        assert exc_info.value.detail == (
            "Password must contain at least one digit. "
            "Password must not contain the username."
        )

    def test_log_only_warns_for_each_violation(self, policy):
        config = policy.replace(log_only=True)
        verdict = evaluate("ab", "xab", config)
        warnings = []
        enforce_verdict(verdict, config, warn=warnings.append)
        assert warnings == list(verdict)

    def test_log_only_without_callback(self, policy):
        config = policy.replace(log_only=True)
        enforce_verdict(Verdict([MissingDigit()]), config)

    def test_error_to_dict(self):
        error = PasswordPolicyError([MissingDigit()])
        assert error.to_dict() == {
            "message": "password does not meet complexity requirements",
            "detail": "Password must contain at least one digit.",
            "violations": [
                {"code": "missing_digit", "detail": "Password must contain at least one digit."}
            ],
        }
