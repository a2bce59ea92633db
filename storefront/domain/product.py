from datetime import datetime
from decimal import Decimal

from pydantic import Field, computed_field

from .common import Image, PageInfo, StorefrontModel


class SelectedOption(StorefrontModel):
    name: str
    value: str


class ProductOption(StorefrontModel):
    name: str
    values: list[str] = Field(default_factory=list)


class ProductVariant(StorefrontModel):
    id: str
    title: str  # e.g. "Red / XL"
    sku: str | None = None
    price: Decimal
    currency_code: str
    compare_at_price: Decimal | None = None
    available_for_sale: bool
    stock: int = 0  # quantityAvailable; null upstream becomes 0
    image: Image | None = None
    selected_options: list[SelectedOption] = Field(default_factory=list)


class Product(StorefrontModel):
    """Domain model of a Shopify product, flattened from its connections.

    ``price``, ``currency_code``, ``available_for_sale``, ``stock`` and
    ``variant_id`` mirror ``variants[0]`` whenever there is at least one variant.
    """

    id: str  # Shopify GID, e.g. "gid://shopify/Product/123"
    title: str
    handle: str
    description: str = ""
    description_html: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured_image: Image | None = None
    images: list[Image] = Field(default_factory=list)
    options: list[ProductOption] = Field(default_factory=list)
    variants: list[ProductVariant] = Field(default_factory=list)

    price: Decimal | None = None
    currency_code: str | None = None
    available_for_sale: bool = False
    stock: int = 0
    variant_id: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def slug(self) -> str:
        return self.handle

    @property
    def default_variant(self) -> ProductVariant | None:
        return self.variants[0] if self.variants else None


class ProductPage(StorefrontModel):
    products: list[Product] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)


class Collection(StorefrontModel):
    id: str
    title: str
    handle: str
    description: str = ""
    description_html: str | None = None
    image: Image | None = None
    updated_at: datetime | None = None
    # The Storefront schema has no total product count on a collection; one
    # page of members is held here and productsPageInfo tells whether more exist.
    products: list[Product] = Field(default_factory=list)
    products_page_info: PageInfo | None = None


class CollectionPage(StorefrontModel):
    collections: list[Collection] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)


class ProductQueryParams(StorefrontModel):
    first: int = 20
    after: str | None = None
    sort_key: str = "CREATED_AT"
    reverse: bool = True
    query: str | None = None


class CollectionProductParams(StorefrontModel):
    first: int = 20
    after: str | None = None
    sort_key: str = "BEST_SELLING"
    reverse: bool = False

