"""Service layer."""
from http_request.services.registry import ClientRegistry, registry
from http_request.services.request_client import RequestClient

__all__ = ["ClientRegistry", "RequestClient", "registry"]
