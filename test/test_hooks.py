"""
Test cases for password type detection and the hook chain.
"""
import pytest

from passwordguard.policy import (
    CheckPasswordHooks,
    MissingDigit,
    PasswordType,
    TooShort,
    Verdict,
    check_password,
    get_password_type,
)


MD5_VERIFIER = "md5" + "0123456789abcdef0123456789abcdef"
SCRAM_VERIFIER = (
    "SCRAM-SHA-256$4096:c2FsdHNhbHQ=$"
    "b3Z3ZW5jb2RlZHN0b3JlZGtleQ==:c2VydmVya2V5c2VydmVya2V5"
)


class TestPasswordType:
    """Test cases for get_password_type."""

    def test_md5(self):
        assert get_password_type(MD5_VERIFIER) is PasswordType.MD5

    def test_scram(self):
        assert get_password_type(SCRAM_VERIFIER) is PasswordType.SCRAM_SHA_256

    @pytest.mark.parametrize("password", [
        "Abc12345!",
        "md5short",
        "md5" + "Z" * 32,
        "SCRAM-SHA-256$oops",
        "",
    ])
    def test_plaintext(self, password):
        assert get_password_type(password) is PasswordType.PLAINTEXT

    @pytest.mark.parametrize("password", [
        MD5_VERIFIER + "\n",
        SCRAM_VERIFIER + "\n",
        " " + MD5_VERIFIER,
        MD5_VERIFIER + "0",
    ])
    def test_verifier_with_extra_characters_is_plaintext(self, password):
        assert get_password_type(password) is PasswordType.PLAINTEXT

    def test_trailing_newline_does_not_skip_policy(self, policy):
        password = MD5_VERIFIER + "\n"
        verdict = check_password("bob", password, get_password_type(password), policy)
        assert not verdict.accepted


class TestBuiltinHook:
    """Test cases for the built-in check_password hook."""

    def test_plaintext_is_evaluated(self, policy):
        verdict = check_password("sp_short", "Aa1!", PasswordType.PLAINTEXT, policy)
        assert list(verdict) == [TooShort(actual=4, required=8)]

    @pytest.mark.parametrize("password_type", [PasswordType.MD5, PasswordType.SCRAM_SHA_256])
    def test_encrypted_input_is_skipped(self, policy, password_type):
        assert check_password("bob", "x", password_type, policy).accepted


class TestHookChain:
    """Test cases for CheckPasswordHooks."""

    def test_empty_chain_accepts(self, policy):
        assert CheckPasswordHooks().run("bob", "x", PasswordType.PLAINTEXT, policy) == Verdict()

    def test_hooks_run_in_registration_order(self, policy):
        calls = []

        def first(username, password, password_type, config):
            calls.append("first")
            return Verdict([MissingDigit()])

        hooks = CheckPasswordHooks([first])

        @hooks.register
        def second(username, password, password_type, config):
            calls.append("second")
            return Verdict([TooShort(actual=1, required=2)])

        verdict = hooks.run("bob", "x", PasswordType.PLAINTEXT, policy)
        assert calls == ["first", "second"]
        assert verdict.codes() == ["missing_digit", "too_short"]
        assert len(hooks) == 2

    def test_none_result_contributes_nothing(self, policy):
        seen = []

        def observer(username, password, password_type, config):
            seen.append((username, password_type, config.min_length))

        hooks = CheckPasswordHooks([observer, check_password])
        verdict = hooks.run("sp_ok", "Abc12345!", PasswordType.PLAINTEXT, policy)
        assert verdict.accepted
        assert seen == [("sp_ok", PasswordType.PLAINTEXT, 8)]

    def test_hooks_property_is_a_copy(self):
        hooks = CheckPasswordHooks([check_password])
        hooks.hooks.append(check_password)
        assert len(hooks) == 1
