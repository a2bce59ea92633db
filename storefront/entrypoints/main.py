import uvicorn
from loguru import logger

from storefront.entrypoints.api import create_app
from storefront.entrypoints.settings import configure_logging, get_config


def main() -> None:
    config = get_config()
    configure_logging(config.LOG_LEVEL)
    logger.info(
        f"Proxying to {config.SHOPIFY_STORE_DOMAIN} "
        f"(Storefront API {config.SHOPIFY_API_VERSION})"
    )
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
