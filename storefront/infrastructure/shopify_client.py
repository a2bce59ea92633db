import asyncio
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel

from storefront.domain.result import ErrorKind, Result
from storefront.shared.decorators import log_errors
from storefront.shared.errors import ConfigurationError


class StorefrontConfig(BaseModel):
    store_domain: str
    storefront_access_token: str
    api_version: str = "2024-04"

    @property
    def endpoint(self) -> str:
        return f"https://{self.store_domain}/api/{self.api_version}/graphql.json"


class ShopifyStorefrontClient:
    """Thin httpx wrapper for the Shopify Storefront GraphQL API.

    Every call is exactly one POST: no retries, no timeout override, no
    caching. Failures come back as ``Result`` values instead of exceptions.
    """

    ACCESS_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = "2024-04",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not store_domain or not access_token:
            raise ConfigurationError(
                "Shopify configuration is missing required fields"
            )
        self._config = StorefrontConfig(
            store_domain=store_domain,
            storefront_access_token=access_token,
            api_version=api_version,
        )
        self._client = http_client or httpx.AsyncClient()
        self._owns_client = http_client is None

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def _headers(self) -> dict[str, str]:
        return {
            self.ACCESS_TOKEN_HEADER: self._config.storefront_access_token,
            "Content-Type": "application/json",
        }

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @log_errors
    async def _post(self, payload: dict) -> httpx.Response:
        return await self._client.post(self.endpoint, headers=self._headers, json=payload)

    async def query(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> Result[dict]:
        """POST a GraphQL document and classify the outcome.

        Returns a successful ``Result`` carrying the ``data`` payload, or a failed
        one whose message is, in priority order, the first GraphQL error's
        message, the HTTP status text, or the caught exception's message.
        """
        payload = {"query": document, "variables": variables or {}}

        try:
            response = await self._post(payload)
        except httpx.HTTPError as exc:
            return Result.fail(
                ErrorKind.transport,
                str(exc) or type(exc).__name__,
                [{"message": str(exc), "type": type(exc).__name__}],
            )

        if not response.is_success:
            return self._http_failure(response)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error(f"Unparseable Storefront response: {exc}")
            return Result.fail(
                ErrorKind.transport,
                f"Invalid JSON in Storefront response: {exc}",
                [{"message": str(exc), "type": type(exc).__name__}],
            )
        if not isinstance(body, dict):
            return Result.fail(
                ErrorKind.transport, "Unexpected Storefront response shape"
            )

        if errors := _error_list(body.get("errors")):
            # data may be partially present; still a failure
            return Result.fail(ErrorKind.graphql, errors[0]["message"], errors)

        return Result.ok(body.get("data"))

    async def mutate(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> Result[dict]:
        return await self.query(document, variables)

    async def batch_query(
        self, requests: list[tuple[str, dict[str, Any] | None]]
    ) -> Result[list[dict]]:
        """Run independent queries concurrently and join on all of them.

        Overall success requires every sub-query to succeed. On failure the
        result still carries the ``data`` of the sub-queries that succeeded.
        """
        results = await asyncio.gather(
            *(self.query(document, variables) for document, variables in requests)
        )
        data = [r.data for r in results if r.data is not None]
        failed = [r for r in results if not r.success]

        if failed:
            errors = [error for r in failed for error in r.errors]
            logger.warning(f"{len(failed)} of {len(results)} batched queries failed")
            return Result[list[dict]](
                success=False,
                kind=failed[0].kind,
                message="Some queries failed",
                errors=errors,
                data=data,
            )
        return Result.ok(data)

    def get_config(self) -> StorefrontConfig:
        return self._config.model_copy()

    def update_config(self, **changes: str) -> None:
        """Replace configuration fields; the endpoint follows automatically."""
        self._config = self._config.model_copy(update=changes)

    @staticmethod
    def _http_failure(response: httpx.Response) -> Result[dict]:
        try:
            body = response.json()
        except ValueError:
            body = None
        errors = _error_list(body.get("errors")) if isinstance(body, dict) else []
        if errors:
            message = errors[0]["message"]
        else:
            message = f"HTTP error {response.status_code}: {response.reason_phrase}"
        return Result.fail(ErrorKind.transport, message, errors)


def _error_list(raw: Any) -> list[dict]:
    """Normalize a GraphQL ``errors`` value to a list of dicts with a ``message``."""
    if not raw:
        return []
    if not isinstance(raw, list):
        raw = [raw]
    errors = []
    for error in raw:
        if isinstance(error, dict) and error.get("message"):
            errors.append(error)
        else:
            errors.append({"message": str(error)})
    return errors
