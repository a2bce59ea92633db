from typing import Protocol

from .cart import Cart, CartCreateInput, CartLineInput, CartLineUpdateInput
from .common import PaginationParams
from .customer import (
    Customer,
    CustomerAccessToken,
    CustomerAccessTokenCreateInput,
    CustomerCreateInput,
    CustomerOrders,
    LogoutResult,
)
from .product import (
    Collection,
    CollectionPage,
    CollectionProductParams,
    Product,
    ProductPage,
    ProductQueryParams,
)
from .result import Result


class ICartService(Protocol):
    async def get_cart(self, cart_id: str) -> Result[Cart]: ...

    async def create_cart(self, cart_input: CartCreateInput | None = None) -> Result[Cart]: ...

    async def add_to_cart(self, cart_id: str, lines: list[CartLineInput]) -> Result[Cart]: ...

    async def remove_from_cart(self, cart_id: str, line_ids: list[str]) -> Result[Cart]: ...

    async def update_cart(
        self, cart_id: str, lines: list[CartLineUpdateInput]
    ) -> Result[Cart]: ...

    async def add_single_item(
        self, cart_id: str, variant_id: str, quantity: int
    ) -> Result[Cart]: ...

    async def update_single_item(
        self, cart_id: str, line_id: str, quantity: int
    ) -> Result[Cart]: ...

    async def get_checkout_url(self, cart_id: str) -> Result[str]: ...


class ICustomerService(Protocol):
    async def register(self, customer_input: CustomerCreateInput) -> Result[Customer]: ...

    async def login(
        self, credentials: CustomerAccessTokenCreateInput
    ) -> Result[CustomerAccessToken]: ...

    async def logout(self, customer_access_token: str) -> Result[LogoutResult]: ...

    async def get_customer(self, customer_access_token: str) -> Result[Customer]: ...

    async def get_customer_orders(
        self, customer_access_token: str, first: int = 20
    ) -> Result[CustomerOrders]: ...


class IProductService(Protocol):
    async def get_product_by_handle(self, handle: str) -> Result[Product]: ...

    async def get_products(
        self, params: ProductQueryParams | None = None
    ) -> Result[ProductPage]: ...

    async def search_products(
        self, text: str, params: ProductQueryParams | None = None
    ) -> Result[ProductPage]: ...


class ICollectionService(Protocol):
    async def get_collections(
        self, params: PaginationParams | None = None
    ) -> Result[CollectionPage]: ...

    async def get_collection_by_handle(
        self, handle: str, params: CollectionProductParams | None = None
    ) -> Result[Collection]: ...
