"""Tests for ProductService and CollectionService."""

from unittest.mock import MagicMock

from storefront.application.collection_service import CollectionService
from storefront.application.product_service import ProductService
from storefront.domain.common import PaginationParams
from storefront.domain.product import CollectionProductParams, ProductQueryParams
from storefront.domain.result import ErrorKind, Result
from storefront.infrastructure import queries


def _collection_node(connection, product_node, handle: str = "summer", with_products: bool = True) -> dict:
    node = {
        "id": f"gid://shopify/Collection/{handle}",
        "title": handle.title(),
        "handle": handle,
        "description": "",
        "descriptionHtml": "",
        "image": None,
        "updatedAt": "2025-02-01T10:00:00Z",
    }
    if with_products:
        node["products"] = connection([product_node("a")])
    return node


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


async def test_get_product_by_handle(client: MagicMock, product_node) -> None:
    client.query.return_value = Result.ok({"product": product_node("linen-shirt")})

    result = await ProductService(client).get_product_by_handle("linen-shirt")

    assert result.success
    assert result.data.handle == "linen-shirt"
    client.query.assert_awaited_once_with(
        queries.GET_PRODUCT_BY_HANDLE_QUERY, {"handle": "linen-shirt"}
    )


async def test_unknown_product_is_not_found(client: MagicMock) -> None:
    client.query.return_value = Result.ok({"product": None})

    result = await ProductService(client).get_product_by_handle("nope")

    assert result.success
    assert result.not_found


async def test_get_products_default_variables(client: MagicMock, connection) -> None:
    client.query.return_value = Result.ok({"products": connection([])})

    result = await ProductService(client).get_products()

    assert result.data.products == []
    assert result.data.page_info.has_next_page is False
    client.query.assert_awaited_once_with(
        queries.GET_PRODUCTS_QUERY,
        {"first": 20, "after": None, "sortKey": "CREATED_AT", "reverse": True, "query": None},
    )


async def test_next_page_uses_end_cursor_as_after(
    client: MagicMock, connection, product_node
) -> None:
    """Walking pages feeds ``endCursor`` back as ``after``."""
    client.query.side_effect = [
        Result.ok({"products": connection([product_node("a"), product_node("b")], hasNextPage=True)}),
        Result.ok({"products": connection([product_node("c")])}),
    ]
    service = ProductService(client)

    first = await service.get_products(ProductQueryParams(first=2))
    second = await service.get_products(
        ProductQueryParams(first=2, after=first.data.page_info.end_cursor)
    )

    assert client.query.await_args_list[1].args[1]["after"] == "cursor-1"
    assert [p.handle for p in second.data.products] == ["c"]
    assert second.data.page_info.has_next_page is False


async def test_search_products_sets_query(client: MagicMock, connection, product_node) -> None:
    client.query.return_value = Result.ok({"products": connection([product_node("linen-shirt")])})

    result = await ProductService(client).search_products("linen", ProductQueryParams(first=5))

    assert [p.handle for p in result.data.products] == ["linen-shirt"]
    variables = client.query.await_args.args[1]
    assert variables["query"] == "linen"
    assert variables["first"] == 5


async def test_get_products_propagates_failure(client: MagicMock) -> None:
    client.query.return_value = Result.fail(ErrorKind.transport, "timed out")

    result = await ProductService(client).get_products()

    assert not result.success
    assert result.message == "timed out"


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


async def test_get_collections(client: MagicMock, connection, product_node) -> None:
    client.query.return_value = Result.ok(
        {
            "collections": connection(
                [
                    _collection_node(connection, product_node, "summer", with_products=False),
                    _collection_node(connection, product_node, "winter", with_products=False),
                ],
                hasNextPage=True,
            )
        }
    )

    result = await CollectionService(client).get_collections(PaginationParams(first=2))

    assert [c.handle for c in result.data.collections] == ["summer", "winter"]
    assert result.data.page_info.end_cursor == "cursor-1"
    client.query.assert_awaited_once_with(
        queries.GET_COLLECTIONS_QUERY, {"first": 2, "after": None}
    )


async def test_get_collection_by_handle(client: MagicMock, connection, product_node) -> None:
    client.query.return_value = Result.ok(
        {"collection": _collection_node(connection, product_node)}
    )

    result = await CollectionService(client).get_collection_by_handle(
        "summer", CollectionProductParams(first=10)
    )

    assert result.data.handle == "summer"
    assert len(result.data.products) == 1
    client.query.assert_awaited_once_with(
        queries.GET_COLLECTION_BY_HANDLE_QUERY,
        {"handle": "summer", "first": 10, "after": None, "sortKey": "BEST_SELLING", "reverse": False},
    )


async def test_unknown_collection_is_not_found(client: MagicMock) -> None:
    client.query.return_value = Result.ok({"collection": None})

    result = await CollectionService(client).get_collection_by_handle("nope")

    assert result.not_found


async def test_null_data_on_listing_is_a_failure_not_a_crash(client: MagicMock) -> None:
    client.query.return_value = Result.ok(None)

    products = await ProductService(client).get_products()
    collections = await CollectionService(client).get_collections()

    for result in (products, collections):
        assert not result.success
        assert result.kind is ErrorKind.transport
        assert result.message == "Unexpected response from Shopify."
