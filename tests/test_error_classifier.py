"""Tests for the Shopify error-message classification table."""

import pytest

from storefront.application.error_classifier import (
    classify_graphql_message,
    reclassify,
    user_error_result,
)
from storefront.domain.result import ErrorKind, Result


@pytest.mark.parametrize(
    "message",
    ["Invalid token", "customer not found", "Access token has EXPIRED"],
)
def test_token_messages_are_unauthorized(message: str) -> None:
    assert classify_graphql_message(message) is ErrorKind.unauthorized


@pytest.mark.parametrize("message", ["Throttled", "", None])
def test_other_messages_are_unclassified(message: str | None) -> None:
    assert classify_graphql_message(message) is None


def test_reclassify_promotes_graphql_token_failure() -> None:
    result = Result.fail(ErrorKind.graphql, "Invalid token", [{"message": "Invalid token"}])

    promoted = reclassify(result)

    assert promoted.kind is ErrorKind.unauthorized
    assert promoted.message == "Invalid token"
    assert promoted.errors == [{"message": "Invalid token"}]


def test_reclassify_leaves_transport_failures_alone() -> None:
    """Only GraphQL failures are promoted; an HTTP 401 body stays a transport error."""
    result = Result.fail(ErrorKind.transport, "Invalid token")

    assert reclassify(result).kind is ErrorKind.transport


def test_reclassify_leaves_success_alone() -> None:
    result = Result.ok({"customer": None})

    assert reclassify(result) is result


def test_user_error_result_uses_first_entry() -> None:
    result = user_error_result([{"message": "first"}, {"message": "second"}])

    assert result.kind is ErrorKind.user
    assert result.message == "first"
    assert len(result.errors) == 2
