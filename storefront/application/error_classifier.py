"""Map Shopify error messages onto an ``ErrorKind``.

Shopify does not give token failures a stable error code, so the only signal is
the message text. The substrings live in one table so they can change without
touching call sites.
"""

from typing import Any

from storefront.domain.result import ErrorKind, Result

# Case-insensitive substring -> category.
GRAPHQL_MESSAGE_TABLE: tuple[tuple[str, ErrorKind], ...] = (
    ("invalid token", ErrorKind.unauthorized),
    ("customer not found", ErrorKind.unauthorized),
    ("expired", ErrorKind.unauthorized),
)


def classify_graphql_message(message: str | None) -> ErrorKind | None:
    """Return the category the table assigns to ``message``, if any."""
    if not message:
        return None
    lowered = message.lower()
    for needle, kind in GRAPHQL_MESSAGE_TABLE:
        if needle in lowered:
            return kind
    return None


def reclassify(result: Result[Any]) -> Result[Any]:
    """Promote a GraphQL failure to ``unauthorized`` when its message says so.

    Transport failures and successes are returned untouched.
    """
    if result.success or result.kind is not ErrorKind.graphql:
        return result
    if classify_graphql_message(result.message) is ErrorKind.unauthorized:
        return result.model_copy(update={"kind": ErrorKind.unauthorized})
    return result


def user_error_result(user_errors: list[dict[str, Any]]) -> Result[Any]:
    """Fail with the first ``userErrors``/``customerUserErrors`` entry's message."""
    return Result.fail(ErrorKind.user, user_errors[0].get("message") or "", user_errors)
