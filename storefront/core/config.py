# storefront/core/config.py
from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env), all optional:
      - DATABASE_URL (SQLAlchemy URL; SQLite file by default)
      - DB_NAME (overrides the database name inside DATABASE_URL)
      - TAX_RATE, SHIPPING_FLAT (checkout pricing)
      - CATALOG_PAGE_SIZE (products shown on the home page)
      - DEFAULT_CART_ID (the cart every request operates on)
    """

    PROJECT_NAME: str = "Nine Cards Commerce"

    # Store config
    DATABASE_URL: str = "sqlite:///./storefront.db"
    DB_NAME: str | None = None
    DB_ECHO: bool = False

    # Checkout pricing
    TAX_RATE: Decimal = Decimal("0.13")
    SHIPPING_FLAT: Decimal = Decimal("20.00")

    CATALOG_PAGE_SIZE: int = 9

    # Single shared cart; every route passes this id to the services
    DEFAULT_CART_ID: str = "default"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
