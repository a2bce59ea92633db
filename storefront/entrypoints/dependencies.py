"""FastAPI dependencies: one Storefront client per request over the app's shared httpx pool."""

from collections.abc import AsyncIterator

from fastapi import Depends, Header, Query, Request

from storefront.application.cart_service import CartService
from storefront.application.collection_service import CollectionService
from storefront.application.customer_service import CustomerService
from storefront.application.product_service import ProductService
from storefront.domain.interfaces import (
    ICartService,
    ICollectionService,
    ICustomerService,
    IProductService,
)
from storefront.domain.session import StorefrontSession
from storefront.entrypoints.settings import Config, get_config
from storefront.infrastructure.shopify_client import ShopifyStorefrontClient


def get_settings(request: Request) -> Config:
    return getattr(request.app.state, "config", None) or get_config()


async def get_storefront_client(
    request: Request, config: Config = Depends(get_settings)
) -> AsyncIterator[ShopifyStorefrontClient]:
    client = ShopifyStorefrontClient(
        store_domain=config.SHOPIFY_STORE_DOMAIN,
        access_token=config.SHOPIFY_STOREFRONT_ACCESS_TOKEN,
        api_version=config.SHOPIFY_API_VERSION,
        http_client=getattr(request.app.state, "http_client", None),
    )
    try:
        yield client
    finally:
        await client.aclose()


def get_cart_service(
    client: ShopifyStorefrontClient = Depends(get_storefront_client),
) -> ICartService:
    return CartService(client)


def get_customer_service(
    client: ShopifyStorefrontClient = Depends(get_storefront_client),
) -> ICustomerService:
    return CustomerService(client)


def get_product_service(
    client: ShopifyStorefrontClient = Depends(get_storefront_client),
) -> IProductService:
    return ProductService(client)


def get_collection_service(
    client: ShopifyStorefrontClient = Depends(get_storefront_client),
) -> ICollectionService:
    return CollectionService(client)


def get_session(
    cart_id: str | None = Query(default=None, alias="cartId"),
    customer_access_token: str | None = Query(default=None, alias="customerAccessToken"),
    authorization: str | None = Header(default=None),
) -> StorefrontSession:
    """Build the session for a GET route.

    The cart id comes from ``?cartId=``; the customer token from
    ``?customerAccessToken=`` or an ``Authorization: Bearer`` header.
    """
    token = customer_access_token
    if not token and authorization and authorization.startswith("Bearer "):
        token = authorization.removeprefix("Bearer ").strip()
    return StorefrontSession(cart_id=cart_id or None, customer_access_token=token or None)
