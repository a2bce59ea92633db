"""Request-scoped shopper session: the cart id and customer token a client holds."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from .result import ErrorKind, Result


class AuthState(StrEnum):
    anonymous = "anonymous"
    authenticated = "authenticated"


@dataclass
class StorefrontSession:
    """Identity threaded through a single request.

    Nothing here is persisted server-side; the client stores ``cart_id`` and
    ``customer_access_token`` and sends them back with every request. The
    expiry is only reported by Shopify; clearing the token in time is up to
    whoever holds the session.
    """

    cart_id: str | None = None
    customer_access_token: str | None = None
    expires_at: datetime | None = None

    @property
    def state(self) -> AuthState:
        if self.customer_access_token:
            return AuthState.authenticated
        return AuthState.anonymous

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.authenticated

    def authenticate(self, access_token: str, expires_at: datetime | None = None) -> None:
        self.customer_access_token = access_token
        self.expires_at = expires_at

    def end(self) -> None:
        """Drop the customer token; the cart id survives as an anonymous cart."""
        self.customer_access_token = None
        self.expires_at = None

    def observe(self, result: Result[Any]) -> None:
        """End the session if ``result`` reports the token as invalid or expired."""
        if not result.success and result.kind is ErrorKind.unauthorized:
            self.end()
