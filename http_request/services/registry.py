"""Registry of named client configurations."""
import logging
from datetime import timedelta
from typing import Dict, List, Optional, Union

import httpx

from http_request.debug import DebugLevel
from http_request.domain.exceptions import ConfigurationError
from http_request.domain.models import ClientConfig
from http_request.services.request_client import ErrorHook, RequestClient

logger = logging.getLogger(__name__)


class ClientRegistry:
    """Named configurations with an optional default.

    Looking up an unknown name creates an empty configuration for it; the
    entry only becomes usable after a successful ``configure``.
    """

    def __init__(self, on_request_error: Optional[ErrorHook] = None):
        self._configs: Dict[str, ClientConfig] = {}
        self._default_name: Optional[str] = None
        self.on_request_error = on_request_error

    @property
    def default_name(self) -> Optional[str]:
        return self._default_name

    def names(self) -> List[str]:
        return list(self._configs)

    def _resolve_name(self, name: Optional[str]) -> str:
        if name == "":
            raise ConfigurationError("Configuration name must not be empty")
        if name is None:
            if self._default_name is None:
                raise ConfigurationError(
                    "No default configuration defined, pass a configuration name"
                )
            return self._default_name
        return name

    def get(self, name: Optional[str] = None) -> ClientConfig:
        """Return the configuration for ``name``, creating it if needed."""
        name = self._resolve_name(name)
        if name not in self._configs:
            self._configs[name] = ClientConfig(name=name)
        return self._configs[name]

    def configure(
        self,
        name: Optional[str] = None,
        *,
        https: Optional[bool] = None,
        server: Optional[str] = None,
        port: Union[str, int, None] = None,
        domain: Optional[str] = None,
        timeout: Union[float, timedelta, None] = None,
        debug_level: Union[DebugLevel, str, None] = None,
        use_by_default: Optional[bool] = None,
    ) -> ClientConfig:
        """Apply the provided options to ``name`` and store the result.

        Raises ConfigurationError when the resulting configuration is
        invalid; the stored configuration is then left unchanged.
        """
        current = self.get(name)
        config = current.configured(
            https=https,
            server=server,
            port=port,
            domain=domain,
            timeout=timeout,
            debug_level=debug_level,
            use_by_default=use_by_default,
        )

        if use_by_default:
            self._set_default(config.name)
        elif use_by_default is False and self._default_name == config.name:
            self._default_name = None

        self._configs[config.name] = config
        logger.info(f"Configured {config.name}: {config.base_url}")
        return config

    def _set_default(self, name: str) -> None:
        previous = self._default_name
        if previous is not None and previous != name and previous in self._configs:
            self._configs[previous] = self._configs[previous].model_copy(
                update={"use_by_default": False}
            )
        self._default_name = name

    def unconfigure(self, name: Optional[str] = None) -> None:
        """Forget ``name``. Clients already built keep working."""
        name = self._resolve_name(name)
        logger.info(f"Unconfigure {name} configuration")
        self._configs.pop(name, None)
        if self._default_name == name:
            self._default_name = None

    def client(
        self,
        name: Optional[str] = None,
        on_request_error: Optional[ErrorHook] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ) -> RequestClient:
        """Build a RequestClient from the current snapshot of ``name``."""
        return RequestClient(
            self.get(name),
            on_request_error=on_request_error or self.on_request_error,
            transport=transport,
            **kwargs,
        )

    def clear(self) -> None:
        """Clear all configurations and the error hook."""
        self._configs.clear()
        self._default_name = None
        self.on_request_error = None


registry = ClientRegistry()
