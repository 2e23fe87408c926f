"""Infrastructure layer: HTTP transport."""
from http_request.infrastructure.clients import HttpTransport

__all__ = ["HttpTransport"]
