"""Structural checks on the GraphQL query catalog."""

import re

import pytest

from storefront.infrastructure import queries

SPREAD = re.compile(r"\.\.\.(\w+Fragment)\b")
DEFINITION = re.compile(r"fragment (\w+Fragment) on \w+")
OPERATION = re.compile(r"^\s*(query|mutation) (\w+)", re.MULTILINE)


@pytest.mark.parametrize("name, document", sorted(queries.CATALOG.items()))
def test_every_spread_fragment_is_defined_once(name: str, document: str) -> None:
    """GraphQL rejects documents with missing, duplicate, or unused fragments."""
    spread = set(SPREAD.findall(document))
    defined = DEFINITION.findall(document)

    assert len(defined) == len(set(defined)), f"{name} defines a fragment twice"
    assert spread == set(defined), f"{name}: spread {spread} != defined {set(defined)}"


@pytest.mark.parametrize("name, document", sorted(queries.CATALOG.items()))
def test_catalog_key_matches_operation_name(name: str, document: str) -> None:
    operation = OPERATION.search(document)

    assert operation is not None
    assert operation.group(2) == name


def test_cart_mutations_select_user_errors() -> None:
    for name in ("cartCreate", "cartLinesAdd", "cartLinesRemove", "cartLinesUpdate"):
        assert "userErrors" in queries.CATALOG[name]


def test_customer_mutations_select_customer_user_errors() -> None:
    for name in ("customerCreate", "customerAccessTokenCreate"):
        assert "customerUserErrors" in queries.CATALOG[name]
