"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (DB URI, token secret, auth policy)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "test", "staging", "production"] = "development"

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="EcomDb",
        description="MongoDB database name"
    )

    # Bearer tokens
    SECRET_KEY: str = Field(
        default="change-me-in-production",
        description="Secret used to sign bearer tokens"
    )
    TOKEN_EXPIRE_MINUTES: int = Field(
        default=10000,
        description="Lifetime of an issued bearer token in minutes"
    )

    # Password hashing
    BCRYPT_ROUNDS: int = Field(
        default=12,
        description="bcrypt cost factor"
    )

    # Forgot password / OTP
    OTP_LENGTH: int = Field(
        default=6,
        description="Number of digits in a reset-password OTP"
    )
    OTP_EXPIRE_MINUTES: int = Field(
        default=10,
        description="Minutes before an issued OTP expires"
    )

    # Login lockout
    MAX_LOGIN_RETRY_LIMIT: int = Field(
        default=3,
        description="Failed logins allowed before the account is locked"
    )
    LOGIN_REACTIVE_MINUTES: int = Field(
        default=20,
        description="Minutes a locked account waits before login is allowed again"
    )

    # Email (OTP delivery). If SMTP is not configured the OTP is not sent and a notice is logged.
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    EMAIL_FROM: Optional[str] = Field(
        default=None,
        description='Sender address, e.g. "Ecom Admin <noreply@example.com>"'
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/admin",
        description="Admin platform route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("SECRET_KEY")
    def validate_secret_key(cls, v, values):
        """Ensure secret key is changed in production."""
        if values.get("ENVIRONMENT") == "production" and v == "change-me-in-production":
            raise ValueError("SECRET_KEY must be changed in production environment")
        return v

    @validator("OTP_LENGTH")
    def validate_otp_length(cls, v):
        if v < 4:
            raise ValueError("OTP_LENGTH must be at least 4 digits")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def smtp_configured(self) -> bool:
        return all([self.SMTP_HOST, self.SMTP_USER, self.SMTP_PASSWORD])

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.MONGODB_URL:
        errors.append("MONGODB_URL is required")

    if not settings.MONGODB_DB_NAME:
        errors.append("MONGODB_DB_NAME is required")

    if settings.MAX_LOGIN_RETRY_LIMIT < 1:
        errors.append("MAX_LOGIN_RETRY_LIMIT must be positive")

    # Production-specific validations
    if settings.is_production:
        if not settings.smtp_configured:
            errors.append("SMTP_HOST, SMTP_USER and SMTP_PASSWORD are required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
