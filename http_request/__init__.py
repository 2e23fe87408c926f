"""Configurable asynchronous JSON HTTP client."""
from http_request.config import settings
from http_request.debug import DebugLevel
from http_request.domain import (
    ClientConfig,
    ConfigurationError,
    DomainException,
    RequestAttempt,
    TransportFailure,
    build_url,
)
from http_request.logging_config import configure_logging
from http_request.services import ClientRegistry, RequestClient, registry

__version__ = settings.app_version

__all__ = [
    "ClientConfig",
    "ClientRegistry",
    "ConfigurationError",
    "DebugLevel",
    "DomainException",
    "RequestAttempt",
    "RequestClient",
    "TransportFailure",
    "build_url",
    "configure_logging",
    "registry",
    "settings",
]
