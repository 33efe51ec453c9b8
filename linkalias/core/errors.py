"""Exception types for the alias store and its collaborators."""


class LinkAliasError(Exception):
    """Base class for recoverable link alias errors."""


class AliasNotFoundError(LinkAliasError, LookupError):
    """Raised when an alias was never issued by the store."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"URL not found for: {alias}")


class InvalidURLError(LinkAliasError, ValueError):
    """Raised by URL validation before a URL reaches the store."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
