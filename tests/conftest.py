"""Shared Storefront GraphQL payload builders, exposed as fixtures."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from storefront.infrastructure.shopify_client import ShopifyStorefrontClient


def _money(amount: str, currency: str = "EUR") -> dict:
    return {"amount": amount, "currencyCode": currency}


def _connection(nodes: list[dict], **page_info) -> dict:
    return {
        "edges": [{"cursor": f"cursor-{i}", "node": n} for i, n in enumerate(nodes)],
        "pageInfo": {
            "hasNextPage": False,
            "hasPreviousPage": False,
            "startCursor": "cursor-0" if nodes else None,
            "endCursor": f"cursor-{len(nodes) - 1}" if nodes else None,
            **page_info,
        },
    }


def make_image(url: str = "https://cdn.shopify.com/a.jpg", alt: str | None = None) -> dict:
    return {"url": url, "altText": alt, "width": 800, "height": 600}


def make_variant_node(
    variant_id: str = "gid://shopify/ProductVariant/1",
    price: str = "19.99",
    image: dict | None = None,
    quantity_available: int | None = 5,
) -> dict:
    return {
        "id": variant_id,
        "title": "Red / M",
        "sku": "SKU-1",
        "availableForSale": True,
        "quantityAvailable": quantity_available,
        "price": _money(price),
        "compareAtPrice": None,
        "selectedOptions": [{"name": "Color", "value": "Red"}, {"name": "Size", "value": "M"}],
        "image": image,
    }


def make_product_node(
    handle: str = "t-shirt",
    images: list[dict] | None = None,
    featured: dict | None = None,
    variants: list[dict] | None = None,
) -> dict:
    return {
        "id": f"gid://shopify/Product/{handle}",
        "title": handle.replace("-", " ").title(),
        "handle": handle,
        "description": "Soft cotton tee",
        "descriptionHtml": "<p>Soft cotton tee</p>",
        "vendor": "Acme",
        "productType": "Shirts",
        "tags": ["summer"],
        "featuredImage": featured,
        "images": _connection(images if images is not None else [make_image()]),
        "options": [{"name": "Color", "values": ["Red"]}, {"name": "Size", "values": ["M"]}],
        "variants": _connection(variants if variants is not None else [make_variant_node()]),
    }


def make_cart_node(cart_id: str = "gid://shopify/Cart/c1", lines: list[dict] | None = None) -> dict:
    lines = lines if lines is not None else [make_cart_line_node()]
    return {
        "id": cart_id,
        "checkoutUrl": "https://shop.example.com/cart/c/c1",
        "createdAt": "2025-02-01T10:00:00Z",
        "updatedAt": "2025-02-01T10:05:00Z",
        "lines": _connection(lines),
        "cost": {
            "totalAmount": _money("39.98"),
            "subtotalAmount": _money("39.98"),
            "totalTaxAmount": None,
        },
        "totalQuantity": sum(line["quantity"] for line in lines),
    }


def make_cart_line_node(line_id: str = "gid://shopify/CartLine/1", quantity: int = 2) -> dict:
    return {
        "id": line_id,
        "quantity": quantity,
        "merchandise": {
            "id": "gid://shopify/ProductVariant/1",
            "title": "Red / M",
            "availableForSale": True,
            "image": make_image(),
            "price": _money("19.99"),
            "product": {"title": "T Shirt", "handle": "t-shirt"},
        },
    }


def make_order_node(number: int = 1001) -> dict:
    return {
        "id": f"gid://shopify/Order/{number}",
        "orderNumber": number,
        "name": f"#{number}",
        "processedAt": "2025-02-01T10:00:00Z",
        "financialStatus": "PAID",
        "fulfillmentStatus": "UNFULFILLED",
        "totalPrice": _money("99.99"),
        "lineItems": _connection(
            [
                {
                    "title": "T Shirt",
                    "quantity": 1,
                    "variant": {"title": "Red / M", "image": None, "price": _money("99.99")},
                }
            ]
        ),
    }


def make_customer_node() -> dict:
    address = {
        "id": "gid://shopify/MailingAddress/1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "company": None,
        "address1": "1 Main St",
        "address2": None,
        "city": "Berlin",
        "province": None,
        "country": "Germany",
        "zip": "10115",
        "phone": None,
    }
    return {
        "id": "gid://shopify/Customer/1",
        "email": "ada@example.com",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "displayName": "Ada Lovelace",
        "phone": None,
        "defaultAddress": address,
        "addresses": _connection([address]),
        "orders": _connection([make_order_node()]),
    }


@pytest.fixture
def connection() -> Callable[..., dict]:
    return _connection


@pytest.fixture
def product_node() -> Callable[..., dict]:
    return make_product_node


@pytest.fixture
def variant_node() -> Callable[..., dict]:
    return make_variant_node


@pytest.fixture
def image() -> Callable[..., dict]:
    return make_image


@pytest.fixture
def cart_node() -> Callable[..., dict]:
    return make_cart_node


@pytest.fixture
def cart_line_node() -> Callable[..., dict]:
    return make_cart_line_node


@pytest.fixture
def order_node() -> Callable[..., dict]:
    return make_order_node


@pytest.fixture
def customer_node() -> Callable[..., dict]:
    return make_customer_node


@pytest.fixture
def client() -> MagicMock:
    """Storefront client double; coroutine methods such as ``query`` and ``mutate`` become AsyncMocks."""
    return MagicMock(spec=ShopifyStorefrontClient)
