from datetime import datetime

from pydantic import Field

from .common import Image, Money, StorefrontModel


class CartMerchandiseProduct(StorefrontModel):
    title: str
    handle: str


class CartMerchandise(StorefrontModel):
    """Product variant snapshot resolved at the time the cart was read."""

    id: str  # Shopify GID, e.g. "gid://shopify/ProductVariant/123"
    title: str
    price: Money
    available_for_sale: bool = True
    image: Image | None = None
    product: CartMerchandiseProduct


class CartLine(StorefrontModel):
    id: str
    quantity: int
    merchandise: CartMerchandise


class CartCost(StorefrontModel):
    subtotal_amount: Money
    total_amount: Money
    total_tax_amount: Money | None = None  # Shopify omits tax until checkout


class Cart(StorefrontModel):
    """Domain model of a Shopify Storefront cart."""

    id: str
    checkout_url: str
    created_at: datetime
    updated_at: datetime
    lines: list[CartLine] = Field(default_factory=list)
    cost: CartCost
    total_quantity: int = 0


# ---------------------------------------------------------------------------
# Mutation inputs
# ---------------------------------------------------------------------------


class CartLineInput(StorefrontModel):
    merchandise_id: str
    quantity: int = Field(default=1, ge=1)


class CartLineUpdateInput(StorefrontModel):
    id: str
    # 0 is forwarded as-is; the platform removes the line.
    quantity: int = Field(..., ge=0)


class BuyerIdentity(StorefrontModel):
    customer_access_token: str | None = None


class CartCreateInput(StorefrontModel):
    buyer_identity: BuyerIdentity | None = None
    lines: list[CartLineInput] = Field(default_factory=list)

    def to_variables(self) -> dict:
        """Return the ``CartInput`` object, omitting anything not set.

        An empty input yields ``{}``, which creates an anonymous cart.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not payload.get("buyerIdentity"):
            payload.pop("buyerIdentity", None)
        if not payload.get("lines"):
            payload.pop("lines", None)
        return payload
