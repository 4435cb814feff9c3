"""
Configuration module for the application.
All configuration values are read from environment variables
(a .env file is loaded by the application factory).
"""
import os
import secrets
import warnings

from passwordguard.policy.models import PolicyConfig
from passwordguard.policy.settings import OPTIONS, build_policy_config, parse_bool, parse_option_value


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Generate a development SECRET_KEY if not set and in development mode
        if not self.SECRET_KEY and self.FLASK_ENV != "production":
            self.SECRET_KEY = secrets.token_urlsafe(32)
            warnings.warn(
                "SECRET_KEY not set. Generated a temporary key for development. "
                "Set SECRET_KEY in your .env file for production!",
                UserWarning
            )

        # Database Configuration (MySQL when DB_HOST is set, DATABASE_URL otherwise)
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///passwordguard.db")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_HOST: str = os.getenv("DB_HOST", "")
        self.DB_PORT: str = os.getenv("DB_PORT", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "")

        # API Configuration
        self.API_PREFIX: str = os.getenv("API_PREFIX", "/api").rstrip("/")

        # SQLAlchemy Configuration
        self.SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
        sqlalchemy_echo = os.getenv("SQLALCHEMY_ECHO", "")
        self.SQLALCHEMY_ECHO: bool = sqlalchemy_echo.lower() == "true" if sqlalchemy_echo else False

        # Password policy: PASSWORDGUARD_MIN_LENGTH, PASSWORDGUARD_REQUIRE_UPPER, ...
        # Raw strings are kept here and parsed by policy_settings().
        self.PASSWORDGUARD_SETTINGS: dict = {}
        for name in OPTIONS:
            raw = os.getenv(f"PASSWORDGUARD_{name.upper()}", "")
            if raw.strip():
                self.PASSWORDGUARD_SETTINGS[name] = raw
        self.PASSWORDGUARD_REPORT_ALL_RAW: str = os.getenv("PASSWORDGUARD_REPORT_ALL", "")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Construct database URI from environment variables."""
        if self.DB_HOST:
            return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return self.DATABASE_URL

    @property
    def PASSWORDGUARD_REPORT_ALL(self) -> bool:
        """Whether enforcing errors list every violation."""
        if not self.PASSWORDGUARD_REPORT_ALL_RAW.strip():
            return False
        return parse_bool("report_all", self.PASSWORDGUARD_REPORT_ALL_RAW)

    def policy_settings(self) -> dict:
        """
        Parsed global policy values, defaults filled in.

        Raises:
            SettingError: an environment value is malformed
        """
        values = {name: opt.default for name, opt in OPTIONS.items()}
        for name, raw in self.PASSWORDGUARD_SETTINGS.items():
            values[name] = parse_option_value(name, raw)
        return values

    def policy_config(self) -> PolicyConfig:
        """Global policy snapshot (no per-role overrides)."""
        return build_policy_config(self.policy_settings())

    def validate(self) -> None:
        """
        Validate required configuration values.
        Only enforces SECRET_KEY in production environment.
        """
        if not self.SECRET_KEY:
            if self.FLASK_ENV == "production":
                raise ValueError(
                    "SECRET_KEY environment variable is required in production. "
                    "Set it in your .env file or environment variables."
                )

        # Fail at startup rather than on the first password change
        self.policy_settings()
        _ = self.PASSWORDGUARD_REPORT_ALL


# Global config instance - will be re-initialized after load_dotenv()
config = Config()
