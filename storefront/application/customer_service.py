from loguru import logger

from storefront.application.error_classifier import reclassify, user_error_result
from storefront.application.mappers import (
    map_access_token,
    map_customer,
    map_customer_orders,
    map_logout,
)
from storefront.domain.customer import (
    Customer,
    CustomerAccessToken,
    CustomerAccessTokenCreateInput,
    CustomerCreateInput,
    CustomerOrders,
    LogoutResult,
)
from storefront.domain.result import ErrorKind, Result
from storefront.infrastructure import queries
from storefront.infrastructure.shopify_client import ShopifyStorefrontClient
from storefront.shared.decorators import log_failures

SESSION_ENDED_MESSAGE = "Customer not found or invalid access token."


class CustomerService:
    """Customer registration, login/logout and account reads.

    A token Shopify rejects, either through an error message in the table of
    ``error_classifier`` or by resolving ``customer`` to null, is reported as
    ``ErrorKind.unauthorized`` so the caller can drop its session.
    """

    def __init__(self, client: ShopifyStorefrontClient) -> None:
        self._client = client

    @log_failures
    async def register(self, customer_input: CustomerCreateInput) -> Result[Customer]:
        result = await self._client.mutate(
            queries.CREATE_CUSTOMER_MUTATION,
            {"input": customer_input.model_dump(mode="json", by_alias=True)},
        )
        if not result.success:
            return result.carry()

        payload = (result.data or {}).get("customerCreate") or {}
        if user_errors := payload.get("customerUserErrors"):
            return user_error_result(user_errors)
        if not payload.get("customer"):
            return Result.fail(
                ErrorKind.transport,
                "Failed to create customer account. Unexpected response from Shopify.",
            )
        logger.info(f"Registered customer {payload['customer']['id']}")
        return Result[Customer].ok(map_customer(payload["customer"]))

    @log_failures
    async def login(
        self, credentials: CustomerAccessTokenCreateInput
    ) -> Result[CustomerAccessToken]:
        """Exchange email/password for a customer access token and its expiry."""
        result = await self._client.mutate(
            queries.CREATE_CUSTOMER_ACCESS_TOKEN_MUTATION,
            {"input": credentials.model_dump(mode="json", by_alias=True)},
        )
        if not result.success:
            return result.carry()

        payload = (result.data or {}).get("customerAccessTokenCreate") or {}
        if user_errors := payload.get("customerUserErrors"):
            return user_error_result(user_errors)
        token = payload.get("customerAccessToken")
        if not token or not token.get("accessToken"):
            return Result.fail(
                ErrorKind.transport, "Failed to login. Unexpected response from Shopify."
            )
        return Result[CustomerAccessToken].ok(map_access_token(token))

    @log_failures
    async def logout(self, customer_access_token: str) -> Result[LogoutResult]:
        result = await self._client.mutate(
            queries.REVOKE_CUSTOMER_ACCESS_TOKEN_MUTATION,
            {"customerAccessToken": customer_access_token},
        )
        if not result.success:
            return reclassify(result).carry()

        payload = (result.data or {}).get("customerAccessTokenRevoke") or {}
        if user_errors := payload.get("userErrors"):
            return user_error_result(user_errors)
        return Result[LogoutResult].ok(map_logout(payload))

    @log_failures
    async def get_customer(self, customer_access_token: str) -> Result[Customer]:
        result = await self._client.query(
            queries.GET_CUSTOMER_QUERY,
            {"customerAccessToken": customer_access_token},
        )
        if not result.success:
            return reclassify(result).carry()

        node = (result.data or {}).get("customer")
        if node is None:
            return Result.fail(ErrorKind.unauthorized, SESSION_ENDED_MESSAGE)
        return Result[Customer].ok(map_customer(node))

    @log_failures
    async def get_customer_orders(
        self, customer_access_token: str, first: int = 20
    ) -> Result[CustomerOrders]:
        """Most recent orders first."""
        result = await self._client.query(
            queries.GET_CUSTOMER_ORDERS_QUERY,
            {"customerAccessToken": customer_access_token, "first": first},
        )
        if not result.success:
            return reclassify(result).carry()

        node = (result.data or {}).get("customer")
        if node is None:
            return Result.fail(ErrorKind.unauthorized, SESSION_ENDED_MESSAGE)
        return Result[CustomerOrders].ok(map_customer_orders(node["orders"]))
