"""Application configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./ideatracker.db",
        description="Database connection URL"
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:5173,http://localhost:5000,http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Sessions & passwords
    secret_key: str = Field(
        default="idea-tracker-secret-change-in-production",
        description="Secret key used to sign the session cookie"
    )
    session_cookie_name: str = Field(
        default="ideatracker_session",
        description="Name of the session cookie"
    )
    session_max_age: int = Field(
        default=30 * 24 * 60 * 60,
        description="Session cookie lifetime in seconds (30 days)"
    )
    session_https_only: bool = Field(
        default=False,
        description="Only send the session cookie over HTTPS"
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost factor for password hashing"
    )

    # Authorization
    legacy_resources_mutable_by_any_user: bool = Field(
        default=True,
        description="Allow any authenticated user to edit or delete ideas without an owner"
    )

    # Startup
    seed_sample_ideas: bool = Field(
        default=True,
        description="Insert sample ideas on startup when the ideas table is empty"
    )

    # Development Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Validate bcrypt cost is within the range bcrypt accepts."""
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("session_max_age")
    @classmethod
    def validate_session_max_age(cls, v: int) -> int:
        """Validate session lifetime is positive."""
        if v <= 0:
            raise ValueError("session_max_age must be positive")
        return v

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate secret key is not empty."""
        if not v.strip():
            raise ValueError("secret_key must not be empty")
        return v


# Global settings instance
settings = Settings()
