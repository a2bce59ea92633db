from datetime import datetime

from pydantic import Field

from .common import PageInfo, StorefrontModel
from .order import Order


class MailingAddress(StorefrontModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    country: str | None = None
    zip: str | None = None
    phone: str | None = None


class Customer(StorefrontModel):
    """Domain model of an authenticated Shopify customer."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    phone: str | None = None
    default_address: MailingAddress | None = None
    addresses: list[MailingAddress] = Field(default_factory=list)
    orders: list[Order] = Field(default_factory=list)


class CustomerAccessToken(StorefrontModel):
    access_token: str
    expires_at: datetime


class CustomerOrders(StorefrontModel):
    orders: list[Order] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)


class LogoutResult(StorefrontModel):
    deleted_access_token: str | None = None
    deleted_customer_access_token_id: str | None = None


# ---------------------------------------------------------------------------
# Mutation inputs
# ---------------------------------------------------------------------------


class CustomerCreateInput(StorefrontModel):
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""


class CustomerAccessTokenCreateInput(StorefrontModel):
    email: str
    password: str
