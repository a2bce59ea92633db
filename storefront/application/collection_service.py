from storefront.application.mappers import map_collection, map_collection_page
from storefront.domain.common import PaginationParams
from storefront.domain.product import (
    Collection,
    CollectionPage,
    CollectionProductParams,
)
from storefront.domain.result import ErrorKind, Result
from storefront.infrastructure import queries
from storefront.infrastructure.shopify_client import ShopifyStorefrontClient
from storefront.shared.decorators import log_failures


class CollectionService:
    def __init__(self, client: ShopifyStorefrontClient) -> None:
        self._client = client

    @log_failures
    async def get_collections(
        self, params: PaginationParams | None = None
    ) -> Result[CollectionPage]:
        params = params or PaginationParams()
        result = await self._client.query(
            queries.GET_COLLECTIONS_QUERY,
            {"first": params.first, "after": params.after},
        )
        if not result.success:
            return result.carry()
        connection = (result.data or {}).get("collections")
        if connection is None:
            return Result.fail(ErrorKind.transport, "Unexpected response from Shopify.")
        return Result[CollectionPage].ok(map_collection_page(connection))

    @log_failures
    async def get_collection_by_handle(
        self, handle: str, params: CollectionProductParams | None = None
    ) -> Result[Collection]:
        """Return the collection with one page of its products, or ``data=None`` if unknown."""
        params = params or CollectionProductParams()
        result = await self._client.query(
            queries.GET_COLLECTION_BY_HANDLE_QUERY,
            {
                "handle": handle,
                "first": params.first,
                "after": params.after,
                "sortKey": params.sort_key,
                "reverse": params.reverse,
            },
        )
        if not result.success:
            return result.carry()
        node = (result.data or {}).get("collection")
        return Result[Collection].ok(map_collection(node) if node else None)
