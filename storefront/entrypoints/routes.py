"""HTTP handlers: validate required fields, call one service operation, respond.

Body fields are all optional at the schema level so that a missing field is
reported with the route's own 400 message rather than a schema error.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from storefront.domain.cart import BuyerIdentity, CartCreateInput
from storefront.domain.common import PaginationParams, StorefrontModel
from storefront.domain.customer import (
    CustomerAccessTokenCreateInput,
    CustomerCreateInput,
)
from storefront.domain.interfaces import (
    ICartService,
    ICollectionService,
    ICustomerService,
    IProductService,
)
from storefront.domain.product import CollectionProductParams, ProductQueryParams
from storefront.domain.session import StorefrontSession
from storefront.entrypoints.dependencies import (
    get_cart_service,
    get_collection_service,
    get_customer_service,
    get_product_service,
    get_session,
)
from storefront.entrypoints.responses import RouteStatuses, failure, respond

router = APIRouter(prefix="/api")


class SessionBody(StorefrontModel):
    """Body fields that identify the shopper rather than the operation."""

    cart_id: str | None = None
    customer_access_token: str | None = None

    def session(self) -> StorefrontSession:
        return StorefrontSession(
            cart_id=self.cart_id or None,
            customer_access_token=self.customer_access_token or None,
        )


class CartAddBody(SessionBody):
    variant_id: str | None = None
    quantity: int | None = None


class CartRemoveBody(SessionBody):
    line_ids: list[str] | None = None


class CartUpdateBody(SessionBody):
    line_id: str | None = None
    quantity: int | None = None


class RegisterBody(StorefrontModel):
    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class LoginBody(StorefrontModel):
    email: str | None = None
    password: str | None = None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------

CART_READ = RouteStatuses(
    graphql=400,
    success_message="Cart retrieved successfully",
    not_found_message="Cart not found",
)
CART_WRITE = RouteStatuses(not_found_message="Cart not found")


@router.get("/cart/get")
async def get_cart(
    session: StorefrontSession = Depends(get_session),
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    if not session.cart_id:
        return failure(400, "Cart ID is required")
    return respond(await carts.get_cart(session.cart_id), CART_READ, entity="cart")


@router.post("/cart/create")
async def create_cart(
    body: SessionBody | None = None,
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    session = (body or SessionBody()).session()
    buyer = (
        BuyerIdentity(customer_access_token=session.customer_access_token)
        if session.is_authenticated
        else None
    )
    statuses = RouteStatuses(success_message="Cart created successfully")
    result = await carts.create_cart(CartCreateInput(buyer_identity=buyer))
    return respond(result, statuses, entity="cart", session=session)


@router.post("/cart/add")
async def add_to_cart(
    body: CartAddBody | None = None,
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    body = body or CartAddBody()
    session = body.session()
    if not session.cart_id or not body.variant_id or not body.quantity:
        return failure(400, "Cart ID, variant ID and quantity are required")
    if body.quantity < 1:
        return failure(400, "Quantity must be a positive integer")
    result = await carts.add_single_item(session.cart_id, body.variant_id, body.quantity)
    return respond(result, CART_WRITE, entity="cart")


@router.post("/cart/remove")
async def remove_from_cart(
    body: CartRemoveBody | None = None,
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    body = body or CartRemoveBody()
    session = body.session()
    if not session.cart_id or not body.line_ids:
        return failure(400, "Cart ID and line IDs are required")
    result = await carts.remove_from_cart(session.cart_id, body.line_ids)
    return respond(result, CART_WRITE, entity="cart")


@router.post("/cart/update")
async def update_cart(
    body: CartUpdateBody | None = None,
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    body = body or CartUpdateBody()
    session = body.session()
    if not session.cart_id or not body.line_id or body.quantity is None:
        return failure(400, "Cart ID, line ID and quantity are required")
    if body.quantity < 0:
        return failure(400, "Quantity cannot be negative")
    result = await carts.update_single_item(session.cart_id, body.line_id, body.quantity)
    return respond(result, CART_WRITE, entity="cart")


@router.post("/checkout/create")
async def create_checkout(
    body: SessionBody | None = None,
    carts: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    session = (body or SessionBody()).session()
    if not session.cart_id:
        return failure(400, "Shopping cart ID is required")
    statuses = RouteStatuses(
        graphql=400,
        success_message="Checkout created, please complete payment",
        not_found_message="Shopping cart not found",
    )
    return respond(await carts.get_checkout_url(session.cart_id), statuses, entity="checkoutUrl")


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------


@router.post("/customers/register")
async def register(
    body: RegisterBody | None = None,
    customers: ICustomerService = Depends(get_customer_service),
) -> JSONResponse:
    body = body or RegisterBody()
    if not body.email or not body.password:
        return failure(400, "Email and password are required.")
    customer_input = CustomerCreateInput(
        email=body.email,
        password=body.password,
        first_name=body.first_name or "",
        last_name=body.last_name or "",
    )
    statuses = RouteStatuses(
        success=201, graphql=400, success_message="Customer account created successfully."
    )
    return respond(await customers.register(customer_input), statuses, entity="customer")


def _render_session(session: StorefrontSession) -> dict[str, Any]:
    expires_at = session.expires_at.isoformat() if session.expires_at else None
    return {"customerAccessToken": session.customer_access_token, "expiresAt": expires_at}


@router.post("/customers/login")
async def login(
    body: LoginBody | None = None,
    customers: ICustomerService = Depends(get_customer_service),
) -> JSONResponse:
    body = body or LoginBody()
    if not body.email or not body.password:
        return failure(400, "Email and password are required.")
    result = await customers.login(
        CustomerAccessTokenCreateInput(email=body.email, password=body.password)
    )
    session = StorefrontSession()
    if result.success and result.data is not None:
        session.authenticate(result.data.access_token, result.data.expires_at)
    statuses = RouteStatuses(graphql=401, user=401, success_message="Login successful.")
    return respond(result, statuses, render=lambda _: _render_session(session))


@router.post("/customers/logout")
async def logout(
    body: SessionBody | None = None,
    customers: ICustomerService = Depends(get_customer_service),
) -> JSONResponse:
    session = (body or SessionBody()).session()
    if not session.is_authenticated:
        return failure(400, "Customer access token is required.")
    result = await customers.logout(session.customer_access_token)
    if result.success:
        session.end()
    statuses = RouteStatuses(success_message="Logout successful.")
    return respond(
        result,
        statuses,
        render=lambda _: {"sessionEnded": not session.is_authenticated},
        session=session,
    )


@router.get("/customers/account")
async def account(
    session: StorefrontSession = Depends(get_session),
    customers: ICustomerService = Depends(get_customer_service),
) -> JSONResponse:
    if not session.is_authenticated:
        return failure(401, "Customer access token is required.")
    result = await customers.get_customer(session.customer_access_token)
    statuses = RouteStatuses(
        graphql=401, success_message="Customer information retrieved successfully."
    )
    return respond(result, statuses, entity="customer", session=session)


@router.post("/orders")
async def orders(
    body: SessionBody | None = None,
    customers: ICustomerService = Depends(get_customer_service),
) -> JSONResponse:
    session = (body or SessionBody()).session()
    if not session.is_authenticated:
        return failure(401, "Customer access token is required")
    result = await customers.get_customer_orders(session.customer_access_token, first=20)
    return respond(result, RouteStatuses(), session=session)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@router.get("/products")
async def list_products(
    first: int = Query(default=20, ge=1, le=250),
    after: str | None = None,
    sort_key: str = Query(default="CREATED_AT", alias="sortKey"),
    reverse: bool = True,
    q: str | None = None,
    products: IProductService = Depends(get_product_service),
) -> JSONResponse:
    params = ProductQueryParams(first=first, after=after, sort_key=sort_key, reverse=reverse)
    if q:
        result = await products.search_products(q, params)
    else:
        result = await products.get_products(params)
    return respond(result, RouteStatuses())


@router.get("/products/{handle}")
async def get_product(
    handle: str,
    products: IProductService = Depends(get_product_service),
) -> JSONResponse:
    statuses = RouteStatuses(not_found_message="Product not found")
    return respond(await products.get_product_by_handle(handle), statuses, entity="product")


@router.get("/collections")
async def list_collections(
    first: int = Query(default=20, ge=1, le=250),
    after: str | None = None,
    collections: ICollectionService = Depends(get_collection_service),
) -> JSONResponse:
    result = await collections.get_collections(PaginationParams(first=first, after=after))
    return respond(result, RouteStatuses())


@router.get("/collections/{handle}")
async def get_collection(
    handle: str,
    first: int = Query(default=20, ge=1, le=250),
    after: str | None = None,
    sort_key: str = Query(default="BEST_SELLING", alias="sortKey"),
    reverse: bool = False,
    collections: ICollectionService = Depends(get_collection_service),
) -> JSONResponse:
    params = CollectionProductParams(first=first, after=after, sort_key=sort_key, reverse=reverse)
    statuses = RouteStatuses(not_found_message="Collection not found")
    return respond(
        await collections.get_collection_by_handle(handle, params), statuses, entity="collection"
    )
