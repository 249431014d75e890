"""Application configuration using Pydantic Settings."""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Portfolio API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5001)

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./portfolio.db",
        description="SQLAlchemy async connection URL",
    )

    # Credentials
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Secret key for signing session tokens",
    )
    jwt_algorithm: str = Field(default="HS256")
    session_lifetime_days: int = Field(
        default=365,
        description="Token lifetime. One year keeps admin sessions effectively open.",
    )
    bcrypt_rounds: int = Field(default=12)

    # Federated login
    admin_emails: str = Field(
        default="",
        description="Comma-separated list of emails allowed to sign in with Google",
    )
    google_client_id: str = Field(default="")
    google_client_secret: str = Field(default="")
    google_callback_url: str = Field(
        default="http://localhost:5001/api/auth/google/callback",
    )
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Base URL the federated login flow redirects back to",
    )

    # Email
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587)
    smtp_user: str = Field(default="")
    smtp_password: str = Field(default="")
    contact_notification_email: str = Field(default="")

    # Uploads
    upload_dir: str = Field(default="uploads")
    blog_image_max_bytes: int = Field(default=5 * 1024 * 1024)
    blog_image_types: str = Field(
        default="image/jpeg,image/jpg,image/png,image/gif,image/webp",
    )
    resume_max_bytes: int = Field(default=100 * 1024 * 1024)
    resume_types: str = Field(
        default=(
            "application/pdf,application/msword,"
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document,"
            "text/plain"
        ),
    )

    # Public site (feeds)
    site_url: str = Field(default="http://localhost:5173")
    site_title: str = Field(default="Portfolio Blog")
    site_description: str = Field(default="Articles and case studies")
    site_author: str = Field(default="")

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure a Postgres URL uses the asyncpg driver scheme."""
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def session_lifetime(self) -> timedelta:
        """How long an issued token stays valid."""
        return timedelta(days=self.session_lifetime_days)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def admin_emails_list(self) -> list[str]:
        return _split_csv(self.admin_emails)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def google_auth_enabled(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def smtp_enabled(self) -> bool:
        return bool(self.smtp_user and self.smtp_password)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def blog_image_types_list(self) -> list[str]:
        return _split_csv(self.blog_image_types)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def resume_types_list(self) -> list[str]:
        return _split_csv(self.resume_types)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return _split_csv(self.cors_origins)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
