from datetime import datetime

from pydantic import Field

from .common import Image, Money, StorefrontModel


class OrderVariant(StorefrontModel):
    """Variant snapshot attached to an order line item; the variant may since be deleted."""

    title: str
    image: Image | None = None
    price: Money | None = None


class OrderLineItem(StorefrontModel):
    title: str
    quantity: int
    variant: OrderVariant | None = None


class Order(StorefrontModel):
    """Domain model representing a customer's Shopify order."""

    id: str  # Shopify GID, e.g. "gid://shopify/Order/123"
    order_number: int
    name: str | None = None  # Human-readable order number, e.g. "#1001"
    processed_at: datetime
    financial_status: str | None = None  # e.g. "PAID"; opaque
    fulfillment_status: str | None = None  # e.g. "UNFULFILLED"; opaque
    total_price: Money
    line_items: list[OrderLineItem] = Field(default_factory=list)
