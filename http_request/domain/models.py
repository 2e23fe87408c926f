"""Domain models for the HTTP request client."""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from http_request.config import settings
from http_request.debug import DebugLevel
from http_request.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """Named configuration of a remote server.

    Instances are immutable; ``configured`` returns a validated copy so a
    rejected update never leaves a half-applied configuration behind.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    https: bool = False
    server: str = ""
    port: str = ""
    domain: str = ""
    timeout: float = Field(default_factory=lambda: settings.default_timeout)
    debug_level: DebugLevel = Field(
        default_factory=lambda: settings.default_debug_level
    )
    use_by_default: bool = False

    @field_validator("port", mode="before")
    @classmethod
    def _port_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("timeout", mode="before")
    @classmethod
    def _timeout_in_seconds(cls, value: Any) -> Any:
        if isinstance(value, timedelta):
            return value.total_seconds()
        return value

    @property
    def scheme(self) -> str:
        return "https" if self.https else "http"

    @property
    def authority(self) -> str:
        if self.port == "":
            return self.server
        return f"{self.server}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.authority}{self.domain}"

    def configured(
        self,
        *,
        https: Optional[bool] = None,
        server: Optional[str] = None,
        port: Union[str, int, None] = None,
        domain: Optional[str] = None,
        timeout: Union[float, timedelta, None] = None,
        debug_level: Union[DebugLevel, str, None] = None,
        use_by_default: Optional[bool] = None,
    ) -> "ClientConfig":
        """Return a validated copy with every provided option applied."""
        updates = {
            "https": https,
            "server": server,
            "port": port,
            "domain": domain,
            "timeout": timeout,
            "debug_level": debug_level,
            "use_by_default": use_by_default,
        }
        data = self.model_dump()
        data.update({key: value for key, value in updates.items() if value is not None})

        try:
            candidate = ClientConfig.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid options for configuration {self.name}: {e}")
            raise ConfigurationError(f"Invalid options for {self.name}: {e}") from e

        candidate.ensure_valid()
        return candidate

    def ensure_valid(self) -> None:
        """Raise ConfigurationError unless server, port and domain are usable."""
        if not self.name:
            raise ConfigurationError("Configuration name must not be empty")

        if self.server == "":
            logger.warning("You need to specify the server that answers the requests")
            logger.warning("Use configure(server='server.com', port='8080')")
            raise ConfigurationError(f"Configuration {self.name} has no server")

        if not (self.port.isascii() and self.port.isdigit()):
            logger.warning("You need to specify a valid port like 5050, 80, 3000")
            raise ConfigurationError(
                f"Configuration {self.name} has an invalid port: {self.port!r}"
            )

        if self.domain != "" and not self.domain.startswith("/"):
            logger.warning("You need to specify a valid domain like '/domain'")
            logger.warning("Use configure(domain='/yourDomain')")
            raise ConfigurationError(
                f"Configuration {self.name} has an invalid domain: {self.domain!r}"
            )

        if self.timeout <= 0:
            raise ConfigurationError(
                f"Configuration {self.name} has a non-positive timeout: {self.timeout}"
            )


class RequestAttempt(BaseModel):
    """A single send of a request, kept for logging and retry bookkeeping."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    body: Optional[Dict[str, Any]] = None
    number: int = 1
    sent_at: datetime = Field(default_factory=datetime.now)

    @property
    def sent_at_label(self) -> str:
        return self.sent_at.strftime("%H:%M:%S")

    def elapsed_ms(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.now()
        return int((now - self.sent_at).total_seconds() * 1000)


def build_url(
    config: ClientConfig,
    service: str,
    query: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build ``{scheme}://{server}[:{port}]{domain}{service}`` plus query string."""
    url = httpx.URL(f"{config.base_url}{service}")
    if query:
        url = url.copy_merge_params(dict(query))
    return str(url)
