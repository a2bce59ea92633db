"""Map raw Storefront GraphQL nodes to domain objects.

Every list field arrives as a ``{edges: [{node, cursor}], pageInfo}``
connection. Mappers read fields explicitly, so an upstream rename fails loudly
with a ``KeyError`` instead of silently producing ``None``.
"""

from decimal import Decimal

from storefront.domain.cart import (
    Cart,
    CartCost,
    CartLine,
    CartMerchandise,
    CartMerchandiseProduct,
)
from storefront.domain.common import Image, Money, PageInfo
from storefront.domain.customer import (
    Customer,
    CustomerAccessToken,
    CustomerOrders,
    LogoutResult,
    MailingAddress,
)
from storefront.domain.order import Order, OrderLineItem, OrderVariant
from storefront.domain.product import (
    Collection,
    CollectionPage,
    Product,
    ProductOption,
    ProductPage,
    ProductVariant,
    SelectedOption,
)


def flatten_connection(connection: dict | None) -> list[dict]:
    """Return the ``node`` of every edge, in order."""
    if not connection:
        return []
    return [edge["node"] for edge in connection.get("edges", [])]


def map_page_info(raw: dict | None) -> PageInfo:
    if not raw:
        return PageInfo()
    return PageInfo(
        has_next_page=raw.get("hasNextPage", False),
        has_previous_page=raw.get("hasPreviousPage", False),
        start_cursor=raw.get("startCursor"),
        end_cursor=raw.get("endCursor"),
    )


def map_money(raw: dict) -> Money:
    return Money(amount=Decimal(raw["amount"]), currency_code=raw["currencyCode"])


def map_image(raw: dict | None) -> Image | None:
    if not raw:
        return None
    return Image(
        url=raw["url"],
        alt_text=raw.get("altText") or None,
        width=raw.get("width"),
        height=raw.get("height"),
    )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------


def map_cart(node: dict) -> Cart:
    lines = []
    for line in flatten_connection(node["lines"]):
        merchandise = line["merchandise"]
        lines.append(
            CartLine(
                id=line["id"],
                quantity=line["quantity"],
                merchandise=CartMerchandise(
                    id=merchandise["id"],
                    title=merchandise["title"],
                    price=map_money(merchandise["price"]),
                    available_for_sale=merchandise.get("availableForSale", True),
                    image=map_image(merchandise.get("image")),
                    product=CartMerchandiseProduct(
                        title=merchandise["product"]["title"],
                        handle=merchandise["product"]["handle"],
                    ),
                ),
            )
        )

    cost = node["cost"]
    tax = cost.get("totalTaxAmount")
    return Cart(
        id=node["id"],
        checkout_url=node["checkoutUrl"],
        created_at=node["createdAt"],
        updated_at=node["updatedAt"],
        lines=lines,
        cost=CartCost(
            subtotal_amount=map_money(cost["subtotalAmount"]),
            total_amount=map_money(cost["totalAmount"]),
            total_tax_amount=map_money(tax) if tax else None,
        ),
        total_quantity=node["totalQuantity"],
    )


# ---------------------------------------------------------------------------
# Products & collections
# ---------------------------------------------------------------------------


def map_variant(node: dict, fallback_image: Image | None) -> ProductVariant:
    compare_at = node.get("compareAtPrice")
    return ProductVariant(
        id=node["id"],
        title=node["title"],
        sku=node.get("sku") or None,
        price=Decimal(node["price"]["amount"]),
        currency_code=node["price"]["currencyCode"],
        compare_at_price=Decimal(compare_at["amount"]) if compare_at else None,
        available_for_sale=node["availableForSale"],
        stock=node.get("quantityAvailable") or 0,
        image=map_image(node.get("image")) or fallback_image,
        selected_options=[
            SelectedOption(name=o["name"], value=o["value"])
            for o in node.get("selectedOptions", [])
        ],
    )


def map_product(node: dict) -> Product:
    """Map a ``ProductFragment`` node to a ``Product``.

    A variant without its own image takes the product's first ``images`` entry;
    ``featuredImage`` is used only when ``images`` is empty.
    """
    images = [map_image(n) for n in flatten_connection(node.get("images"))]
    images = [image for image in images if image is not None]
    featured = map_image(node.get("featuredImage"))
    fallback_image = images[0] if images else featured

    variants = [
        map_variant(n, fallback_image) for n in flatten_connection(node.get("variants"))
    ]
    default = variants[0] if variants else None

    return Product(
        id=node["id"],
        title=node["title"],
        handle=node["handle"],
        description=node.get("description") or "",
        description_html=node.get("descriptionHtml"),
        vendor=node.get("vendor"),
        product_type=node.get("productType"),
        tags=node.get("tags", []),
        featured_image=featured or (images[0] if images else None),
        images=images,
        options=[
            ProductOption(name=o["name"], values=o.get("values", []))
            for o in node.get("options") or []
        ],
        variants=variants,
        price=default.price if default else None,
        currency_code=default.currency_code if default else None,
        available_for_sale=default.available_for_sale if default else False,
        stock=default.stock if default else 0,
        variant_id=default.id if default else None,
    )


def map_product_page(connection: dict) -> ProductPage:
    return ProductPage(
        products=[map_product(n) for n in flatten_connection(connection)],
        page_info=map_page_info(connection.get("pageInfo")),
    )


def map_collection(node: dict) -> Collection:
    products_connection = node.get("products")
    products = (
        [map_product(n) for n in flatten_connection(products_connection)]
        if products_connection is not None
        else []
    )
    return Collection(
        id=node["id"],
        title=node["title"],
        handle=node["handle"],
        description=node.get("description") or "",
        description_html=node.get("descriptionHtml"),
        image=map_image(node.get("image")),
        updated_at=node.get("updatedAt"),
        products=products,
        products_page_info=(
            map_page_info(products_connection.get("pageInfo"))
            if products_connection is not None
            else None
        ),
    )


def map_collection_page(connection: dict) -> CollectionPage:
    return CollectionPage(
        collections=[map_collection(n) for n in flatten_connection(connection)],
        page_info=map_page_info(connection.get("pageInfo")),
    )


# ---------------------------------------------------------------------------
# Customers & orders
# ---------------------------------------------------------------------------


def map_address(node: dict | None) -> MailingAddress | None:
    if not node:
        return None
    return MailingAddress(
        id=node["id"],
        first_name=node.get("firstName"),
        last_name=node.get("lastName"),
        company=node.get("company"),
        address1=node.get("address1"),
        address2=node.get("address2"),
        city=node.get("city"),
        province=node.get("province"),
        country=node.get("country"),
        zip=node.get("zip"),
        phone=node.get("phone"),
    )


def map_order(node: dict) -> Order:
    line_items = []
    for item in flatten_connection(node.get("lineItems")):
        variant = item.get("variant")
        line_items.append(
            OrderLineItem(
                title=item["title"],
                quantity=item["quantity"],
                variant=OrderVariant(
                    title=variant["title"],
                    image=map_image(variant.get("image")),
                    price=map_money(variant["price"]) if variant.get("price") else None,
                )
                if variant
                else None,
            )
        )

    return Order(
        id=node["id"],
        order_number=node["orderNumber"],
        name=node.get("name"),
        processed_at=node["processedAt"],
        financial_status=node.get("financialStatus"),
        fulfillment_status=node.get("fulfillmentStatus"),
        total_price=map_money(node["totalPrice"]),
        line_items=line_items,
    )


def map_customer(node: dict) -> Customer:
    addresses = [map_address(n) for n in flatten_connection(node.get("addresses"))]
    return Customer(
        id=node["id"],
        email=node.get("email"),
        first_name=node.get("firstName"),
        last_name=node.get("lastName"),
        display_name=node.get("displayName"),
        phone=node.get("phone"),
        default_address=map_address(node.get("defaultAddress")),
        addresses=[a for a in addresses if a is not None],
        orders=[map_order(n) for n in flatten_connection(node.get("orders"))],
    )


def map_customer_orders(connection: dict) -> CustomerOrders:
    return CustomerOrders(
        orders=[map_order(n) for n in flatten_connection(connection)],
        page_info=map_page_info(connection.get("pageInfo")),
    )


def map_access_token(node: dict) -> CustomerAccessToken:
    return CustomerAccessToken(access_token=node["accessToken"], expires_at=node["expiresAt"])


def map_logout(node: dict) -> LogoutResult:
    return LogoutResult(
        deleted_access_token=node.get("deletedAccessToken"),
        deleted_customer_access_token_id=node.get("deletedCustomerAccessTokenId"),
    )
