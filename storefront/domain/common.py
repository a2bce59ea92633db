from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StorefrontModel(BaseModel):
    """Base for every domain model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Money(StorefrontModel):
    amount: Decimal
    currency_code: str


class Image(StorefrontModel):
    url: str
    alt_text: str | None = None
    width: int | None = None
    height: int | None = None


class PageInfo(StorefrontModel):
    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


class PaginationParams(StorefrontModel):
    """Cursor pagination arguments.

    Services only page forward (``first``/``after``); ``last``/``before`` are
    accepted for completeness and never sent.
    """

    first: int = 20
    after: str | None = None
    last: int | None = None
    before: str | None = None
