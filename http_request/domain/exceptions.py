"""Domain exceptions for the HTTP request client."""


class DomainException(Exception):
    """Base domain exception."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(DomainException):
    """Invalid or missing client configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
        )


class TransportFailure(DomainException):
    """No response could be obtained from the server.

    Raised for timeouts, refused connections and DNS failures. The request
    client consumes it to drive retries; callers never see it.
    """

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(
            message=f"{method} {url} failed: {reason}",
            code="TRANSPORT_FAILURE",
        )
