from storefront.application.mappers import map_product, map_product_page
from storefront.domain.product import Product, ProductPage, ProductQueryParams
from storefront.domain.result import ErrorKind, Result
from storefront.infrastructure import queries
from storefront.infrastructure.shopify_client import ShopifyStorefrontClient
from storefront.shared.decorators import log_failures


class ProductService:
    """Product reads: single product by handle and paginated listing/search."""

    def __init__(self, client: ShopifyStorefrontClient) -> None:
        self._client = client

    @log_failures
    async def get_product_by_handle(self, handle: str) -> Result[Product]:
        result = await self._client.query(
            queries.GET_PRODUCT_BY_HANDLE_QUERY, {"handle": handle}
        )
        if not result.success:
            return result.carry()
        node = (result.data or {}).get("product")
        return Result[Product].ok(map_product(node) if node else None)

    @log_failures
    async def get_products(
        self, params: ProductQueryParams | None = None
    ) -> Result[ProductPage]:
        """Return one page of products plus its ``pageInfo``.

        Pass ``page_info.end_cursor`` back as ``after`` for the next page.
        """
        params = params or ProductQueryParams()
        result = await self._client.query(
            queries.GET_PRODUCTS_QUERY,
            {
                "first": params.first,
                "after": params.after,
                "sortKey": params.sort_key,
                "reverse": params.reverse,
                "query": params.query,
            },
        )
        if not result.success:
            return result.carry()
        connection = (result.data or {}).get("products")
        if connection is None:
            return Result.fail(ErrorKind.transport, "Unexpected response from Shopify.")
        return Result[ProductPage].ok(map_product_page(connection))

    async def search_products(
        self, text: str, params: ProductQueryParams | None = None
    ) -> Result[ProductPage]:
        """``get_products`` with Shopify's free-text ``query`` filter set to ``text``."""
        params = (params or ProductQueryParams()).model_copy(update={"query": text})
        return await self.get_products(params)
