"""Domain layer: configuration models and exceptions."""
from http_request.domain.exceptions import (
    ConfigurationError,
    DomainException,
    TransportFailure,
)
from http_request.domain.models import (
    ClientConfig,
    DebugLevel,
    RequestAttempt,
    build_url,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DebugLevel",
    "DomainException",
    "RequestAttempt",
    "TransportFailure",
    "build_url",
]
