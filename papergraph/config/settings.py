"""Application settings and configuration"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Papergraph"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # HTTP
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Catalog bootstrap
    SEED_DEFAULT_TAGS: bool = True

    # Tags created on the fly from upload payloads
    AUTO_TAG_COLOR: str = "#6B7280"
    AUTO_TAG_CATEGORY: str = "custom"

    # Search pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Author statistics
    TOP_CATEGORIES_LIMIT: int = 3
    TOP_TAGS_LIMIT: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
