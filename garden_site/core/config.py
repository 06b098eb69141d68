# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        self.app_name: Final[str] = os.getenv("APP_NAME", "Green Garden API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Final[Optional[str]] = os.getenv("LOG_FILE") or None

        # Server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/London")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Storage Configuration
        # "auto" selects MongoDB when DATABASE_URL is present, in-memory otherwise
        self.database_url: Final[Optional[str]] = os.getenv("DATABASE_URL")
        self.storage_backend: Final[str] = self._resolve_backend(
            os.getenv("STORAGE_BACKEND", "auto").lower()
        )
        self.mongo_uri: Final[str] = self.database_url or "mongodb://localhost:27017"
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "garden_services_db")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # Demo data is seeded by default only for the in-memory store
        self.seed_demo_data: Final[bool] = _env_flag(
            "SEED_DEMO_DATA",
            "true" if self.storage_backend == "memory" else "false",
        )

        # Admin API guard. Empty means the admin surface is open.
        self.admin_api_token: Final[str] = os.getenv("ADMIN_API_TOKEN", "")

        # CORS
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.services_collection: Final[str] = os.getenv("SERVICES_COLLECTION", "services")
        self.portfolio_collection: Final[str] = os.getenv("PORTFOLIO_COLLECTION", "portfolioitems")
        self.blog_posts_collection: Final[str] = os.getenv("BLOG_POSTS_COLLECTION", "blogposts")
        self.inquiries_collection: Final[str] = os.getenv("INQUIRIES_COLLECTION", "inquiries")
        self.appointments_collection: Final[str] = os.getenv("APPOINTMENTS_COLLECTION", "appointments")
        self.testimonials_collection: Final[str] = os.getenv("TESTIMONIALS_COLLECTION", "testimonials")

    def _resolve_backend(self, requested: str) -> str:
        if requested in ("memory", "mongodb"):
            return requested
        return "mongodb" if self.database_url else "memory"

    @property
    def uses_mongodb(self) -> bool:
        return self.storage_backend == "mongodb"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
