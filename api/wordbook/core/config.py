from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of wordbook directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - DATABASE_URL must be provided by the environment
    database_url: str = ""

    # API
    api_prefix: str = "/api"

    # CORS - the dictionary frontend in dev and on render
    cors_origins: list[str] = [
        "http://localhost:3000",
        "https://dictionary-search.onrender.com",
    ]
    cors_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

    environment: str = "production"
    log_level: str = "INFO"

    # Highest level shown in the level x recency statistics table
    statistics_max_level: int = 12

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Some hosts only provide DATABASE_URL in uppercase
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
