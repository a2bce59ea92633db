"""Translate service ``Result`` values into the JSON envelope and HTTP status.

Every route shares ``respond``; what differs between routes is captured in a
``RouteStatuses`` table instead of per-route branching.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi.responses import JSONResponse

from storefront.domain.common import StorefrontModel
from storefront.domain.result import ErrorKind, Result
from storefront.domain.session import StorefrontSession

UNEXPECTED_ERROR_MESSAGE = "An error occurred processing your request."


@dataclass(frozen=True)
class RouteStatuses:
    success: int = 200
    graphql: int = 500
    user: int = 400
    transport: int = 500
    success_message: str | None = None
    not_found_message: str = "Not found"


def envelope(status: int, success: bool, message: str | None = None, **fields: Any) -> JSONResponse:
    content: dict[str, Any] = {"success": success}
    if message is not None:
        content["message"] = message
    content.update(fields)
    return JSONResponse(status_code=status, content=content)


def failure(status: int, message: str, errors: list | None = None) -> JSONResponse:
    if errors:
        return envelope(status, False, message, errors=errors)
    return envelope(status, False, message)


def status_for(kind: ErrorKind | None, statuses: RouteStatuses) -> int:
    match kind:
        case ErrorKind.unauthorized:
            return 401
        case ErrorKind.user:
            return statuses.user
        case ErrorKind.graphql:
            return statuses.graphql
        case ErrorKind.transport:
            return statuses.transport
        case _:
            return 500


def _wire(value: Any) -> Any:
    if isinstance(value, StorefrontModel):
        return value.to_wire()
    return value


def respond(
    result: Result[Any],
    statuses: RouteStatuses,
    entity: str | None = None,
    render: Callable[[Any], dict[str, Any]] | None = None,
    session: StorefrontSession | None = None,
) -> JSONResponse:
    """Build the response for ``result``.

    On success the payload goes under ``entity``, or is merged into the
    envelope when ``entity`` is None. ``render`` overrides both. A failure
    that ends the customer's session adds ``sessionEnded: true`` so the client
    can clear its stored token.
    """
    if not result.success:
        fields: dict[str, Any] = {}
        if result.errors:
            fields["errors"] = result.errors
        if session is not None and session.is_authenticated:
            session.observe(result)
            if not session.is_authenticated:
                fields["sessionEnded"] = True
        return envelope(
            status_for(result.kind, statuses),
            False,
            result.message or UNEXPECTED_ERROR_MESSAGE,
            **fields,
        )

    if result.data is None:
        return envelope(404, False, statuses.not_found_message, **({entity: None} if entity else {}))

    if render is not None:
        fields = render(result.data)
    elif entity is not None:
        fields = {entity: _wire(result.data)}
    else:
        fields = _wire(result.data)
    return envelope(statuses.success, True, statuses.success_message, **fields)
