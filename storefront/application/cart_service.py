from typing import Any

from loguru import logger

from storefront.application.error_classifier import user_error_result
from storefront.application.mappers import map_cart
from storefront.domain.cart import (
    Cart,
    CartCreateInput,
    CartLineInput,
    CartLineUpdateInput,
)
from storefront.domain.result import Result
from storefront.infrastructure import queries
from storefront.infrastructure.shopify_client import ShopifyStorefrontClient
from storefront.shared.decorators import log_failures


class CartService:
    """Application service for cart operations.

    Batched line operations are applied atomically by Shopify inside a single
    mutation; concurrent mutations on one cart are not coordinated here.
    """

    def __init__(self, client: ShopifyStorefrontClient) -> None:
        self._client = client

    @log_failures
    async def get_cart(self, cart_id: str) -> Result[Cart]:
        """Return the cart, or a successful result with ``data=None`` if it is unknown."""
        result = await self._client.query(queries.GET_CART_QUERY, {"cartId": cart_id})
        if not result.success:
            return result.carry()
        node = (result.data or {}).get("cart")
        if node is None:
            logger.info(f"Cart {cart_id} not found")
            return Result[Cart].ok(None)
        return Result[Cart].ok(map_cart(node))

    @log_failures
    async def create_cart(self, cart_input: CartCreateInput | None = None) -> Result[Cart]:
        """Create a cart, bound to a customer when ``buyer_identity`` carries a token."""
        variables = {"input": (cart_input or CartCreateInput()).to_variables()}
        result = await self._client.mutate(queries.CREATE_CART_MUTATION, variables)
        return self._cart_payload(result, "cartCreate")

    @log_failures
    async def add_to_cart(self, cart_id: str, lines: list[CartLineInput]) -> Result[Cart]:
        result = await self._client.mutate(
            queries.ADD_TO_CART_MUTATION,
            {"cartId": cart_id, "lines": _dump(lines)},
        )
        return self._cart_payload(result, "cartLinesAdd")

    @log_failures
    async def remove_from_cart(self, cart_id: str, line_ids: list[str]) -> Result[Cart]:
        result = await self._client.mutate(
            queries.REMOVE_FROM_CART_MUTATION,
            {"cartId": cart_id, "lineIds": list(line_ids)},
        )
        return self._cart_payload(result, "cartLinesRemove")

    @log_failures
    async def update_cart(
        self, cart_id: str, lines: list[CartLineUpdateInput]
    ) -> Result[Cart]:
        result = await self._client.mutate(
            queries.UPDATE_CART_MUTATION,
            {"cartId": cart_id, "lines": _dump(lines)},
        )
        return self._cart_payload(result, "cartLinesUpdate")

    async def add_single_item(
        self, cart_id: str, variant_id: str, quantity: int
    ) -> Result[Cart]:
        return await self.add_to_cart(
            cart_id, [CartLineInput(merchandise_id=variant_id, quantity=quantity)]
        )

    async def update_single_item(
        self, cart_id: str, line_id: str, quantity: int
    ) -> Result[Cart]:
        """Set one line's quantity. A quantity of 0 is sent through; Shopify drops the line."""
        return await self.update_cart(
            cart_id, [CartLineUpdateInput(id=line_id, quantity=quantity)]
        )

    async def get_checkout_url(self, cart_id: str) -> Result[str]:
        """Return the cart's checkout URL; the cart itself is the checkout."""
        result = await self.get_cart(cart_id)
        if not result.success:
            return result.carry()
        if result.data is None:
            return Result[str].ok(None)
        return Result[str].ok(result.data.checkout_url)

    @staticmethod
    def _cart_payload(result: Result[dict], field: str) -> Result[Cart]:
        """Unwrap ``{cart, userErrors}`` from a cart mutation payload."""
        if not result.success:
            return result.carry()
        payload = (result.data or {}).get(field) or {}
        if user_errors := payload.get("userErrors"):
            return user_error_result(user_errors)
        node = payload.get("cart")
        if node is None:
            return Result[Cart].ok(None)
        return Result[Cart].ok(map_cart(node))


def _dump(lines: list[Any]) -> list[dict]:
    return [line.model_dump(mode="json", by_alias=True) for line in lines]
