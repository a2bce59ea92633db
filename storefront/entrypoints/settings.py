import sys
from functools import lru_cache

from loguru import logger
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.shared.errors import ConfigurationError


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    SHOPIFY_STORE_DOMAIN: str
    SHOPIFY_STOREFRONT_ACCESS_TOKEN: str
    SHOPIFY_API_VERSION: str = "2024-04"

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000


@lru_cache
def get_config() -> Config:
    """Load settings once. Missing Shopify credentials are fatal, never retried."""
    try:
        config = Config()  # type: ignore[call-arg]
    except ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]) for err in exc.errors())
        raise ConfigurationError(f"Missing configuration: {missing}") from exc
    if not config.SHOPIFY_STORE_DOMAIN or not config.SHOPIFY_STOREFRONT_ACCESS_TOKEN:
        raise ConfigurationError()
    return config


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
