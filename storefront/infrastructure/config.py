"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Storefront GraphQL API
    storefront_url: str = "https://mock.shop"
    storefront_api_version: str = "2024-10"
    storefront_access_token: str = ""
    storefront_timeout: float = 10.0

    # Catalog
    root_category_handle: str = "hardware"
    category_metaobject_type: str = "category_metaobject"
    category_max_depth: int = 16
    collection_page_size: int = 50

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
