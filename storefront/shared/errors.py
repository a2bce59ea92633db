class StorefrontError(Exception):
    """Base class for errors raised (not returned) by the storefront package."""


class ConfigurationError(StorefrontError):
    """Raised when the Shopify store domain or access token is missing."""

    MESSAGE = "Shopify API credentials not configured."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.MESSAGE)
        self.detail = detail
