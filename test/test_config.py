"""
Test cases for environment-driven configuration.
"""
import pytest

from passwordguard.config import Config
from passwordguard.policy import PolicyConfig, SettingError
from passwordguard.policy.settings import OPTIONS


@pytest.fixture
def clean_env(monkeypatch):
    for name in OPTIONS:
        monkeypatch.delenv(f'PASSWORDGUARD_{name.upper()}', raising=False)
    monkeypatch.delenv('PASSWORDGUARD_REPORT_ALL', raising=False)
    return monkeypatch


class TestPolicyConfiguration:
    """Test cases for PASSWORDGUARD_* variables."""

    def test_defaults(self, clean_env):
        assert Config().policy_config() == PolicyConfig()
        assert Config().PASSWORDGUARD_REPORT_ALL is False

    def test_values_from_environment(self, clean_env):
        clean_env.setenv('PASSWORDGUARD_MIN_LENGTH', '16')
        clean_env.setenv('PASSWORDGUARD_REQUIRE_SPECIAL', 'off')
        clean_env.setenv('PASSWORDGUARD_LOG_ONLY', 'on')
        clean_env.setenv('PASSWORDGUARD_REPORT_ALL', 'true')

        config = Config()
        assert config.policy_config() == PolicyConfig(
            min_length=16, require_special=False, log_only=True
        )
        assert config.PASSWORDGUARD_REPORT_ALL is True

    def test_blank_values_fall_back_to_defaults(self, clean_env):
        clean_env.setenv('PASSWORDGUARD_MIN_LENGTH', '   ')
        assert Config().policy_config().min_length == 12

    def test_malformed_value_fails_validation(self, clean_env):
        clean_env.setenv('PASSWORDGUARD_MIN_LENGTH', 'twelve')
        config = Config()
        with pytest.raises(SettingError):
            config.validate()

    @pytest.mark.parametrize("raw", ["t", "y", "ON", "1"])
    def test_report_all_accepts_boolean_spellings(self, clean_env, raw):
        clean_env.setenv('PASSWORDGUARD_REPORT_ALL', raw)
        assert Config().PASSWORDGUARD_REPORT_ALL is True

    def test_malformed_report_all_fails_validation(self, clean_env):
        clean_env.setenv('PASSWORDGUARD_REPORT_ALL', 'maybe')
        config = Config()
        with pytest.raises(SettingError):
            config.validate()


class TestApplicationConfiguration:
    """Test cases for the remaining settings."""

    def test_database_uri_fallback(self, monkeypatch):
        monkeypatch.delenv('DB_HOST', raising=False)
        monkeypatch.setenv('DATABASE_URL', 'sqlite:///:memory:')
        assert Config().SQLALCHEMY_DATABASE_URI == 'sqlite:///:memory:'

    def test_mysql_uri(self, monkeypatch):
        monkeypatch.setenv('DB_HOST', 'db')
        monkeypatch.setenv('DB_PORT', '3306')
        monkeypatch.setenv('DB_USER', 'guard')
        monkeypatch.setenv('DB_PASSWORD', 'secret')
        monkeypatch.setenv('DB_NAME', 'roles')
        assert Config().SQLALCHEMY_DATABASE_URI == 'mysql+pymysql://guard:secret@db:3306/roles'

    def test_production_requires_secret(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'production')
        monkeypatch.setenv('SECRET_KEY', '')
        with pytest.raises(ValueError):
            Config().validate()

    def test_development_generates_secret(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'development')
        monkeypatch.setenv('SECRET_KEY', '')
        with pytest.warns(UserWarning):
            config = Config()
        assert config.SECRET_KEY

    def test_api_prefix_trailing_slash(self, monkeypatch):
        monkeypatch.setenv('API_PREFIX', '/v2/')
        assert Config().API_PREFIX == '/v2'
