"""HTTP transport clients."""
from http_request.infrastructure.clients.base import JSON_HEADERS, HttpTransport

__all__ = ["HttpTransport", "JSON_HEADERS"]
