"""
Configuration management for the category listing admin backend.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database configuration (host platform's content database)
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "category_listing_dev"
    POSTGRES_USER: str = "category_listing"
    POSTGRES_PASSWORD: str

    # Service configuration
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8008

    # Admin extension configuration
    ADMIN_NAMESPACE: str = "dfm-wp-public"  # Prefix for every category page path key
    ADMIN_CAPABILITY: str = "manage_categories"  # Anyone who can edit categories sees the pages
    TAXONOMY_KIND: str = "category"

    # Header set by the upstream auth layer, comma-separated capabilities
    ADMIN_CAPABILITIES_HEADER: str = "X-Admin-Capabilities"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json | text

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        """Construct PostgreSQL connection URL."""
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def async_database_url(self) -> str:
        """Construct async PostgreSQL connection URL."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


# Global settings instance
settings = Settings()
