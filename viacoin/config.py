"""Client connection configuration.

Resolved once from a connection string, an options mapping, a YAML file
or environment variables, then held immutable by the transport.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlsplit

import httpx
import yaml

from .exceptions import ConfigurationError

DEFAULT_PORT = 8332
DEFAULT_TIMEOUT = 30.0
SCHEMES = ("http", "https")


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Connection settings for one viacoind endpoint.

    Attributes:
        scheme: ``http`` or ``https``.
        host: Daemon host name or address.
        port: RPC port.
        user: Basic auth user name.
        password: Basic auth password.
        ca: Path to a CA certificate; enables TLS verification against it.
        timeout: Transport timeout in seconds.
    """

    scheme: str = "http"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    user: str = ""
    password: str = ""
    ca: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.scheme not in SCHEMES:
            raise ConfigurationError(f"Unsupported scheme: {self.scheme}")
        if not self.host:
            raise ConfigurationError("Host is required")

    @property
    def base_uri(self) -> httpx.URL:
        """Root URL of the RPC endpoint, without credentials."""
        return httpx.URL(scheme=self.scheme, host=self.host, port=self.port, path="/")

    @property
    def auth(self) -> tuple[str, str]:
        return (self.user, self.password)

    @property
    def verify(self) -> str | bool:
        """Value for httpx's ``verify`` option."""
        return self.ca if self.ca else True

    @classmethod
    def from_url(cls, url: str) -> "ClientConfig":
        """Parse ``scheme://[user[:pass]@]host[:port][/]``.

        Raises:
            ConfigurationError: If the string is not an http(s) URL.
        """
        try:
            parsed = urlsplit(url)
            port = parsed.port
        except (ValueError, TypeError, AttributeError) as exc:
            raise ConfigurationError("Invalid url") from exc

        if parsed.scheme not in SCHEMES or not parsed.hostname:
            raise ConfigurationError("Invalid url")

        return cls(
            scheme=parsed.scheme,
            host=parsed.hostname,
            port=port or DEFAULT_PORT,
            user=unquote(parsed.username or ""),
            password=unquote(parsed.password or ""),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Create config from an options mapping.

        Unknown keys are ignored. A ``url`` key is parsed first and the
        remaining keys override its parts.

        Raises:
            ConfigurationError: If the url, port or timeout is invalid.
        """
        config = cls.from_url(data["url"]) if data.get("url") else cls()
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in data.items() if k in known and v is not None}
        for key, convert in (("port", int), ("timeout", float)):
            if key in overrides:
                try:
                    overrides[key] = convert(overrides[key])
                except (TypeError, ValueError) as exc:
                    raise ConfigurationError(f"Invalid {key}: {overrides[key]!r}") from exc
        return replace(config, **overrides)

    @classmethod
    def from_yaml(cls, path: Path) -> "ClientConfig":
        """Load configuration from YAML file.

        String values in format ${VAR_NAME} are expanded from the
        environment. The settings may sit at the top level or under a
        ``viacoind`` key.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Loaded configuration, defaults if the file is missing or empty.

        Raises:
            ConfigurationError: If the file is not a YAML mapping.
        """
        if not path.exists():
            return cls()

        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}") from exc
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping in {path}")
        if isinstance(data.get("viacoind"), dict):
            data = data["viacoind"]

        return cls.from_dict({k: _expand_env(v) for k, v in data.items()})

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables.

        Environment variables:
            VIACOIND_URL: Full connection string; the variables below
                override its parts
            VIACOIND_SCHEME: http or https
            VIACOIND_HOST: Daemon host
            VIACOIND_PORT: RPC port
            VIACOIND_USER: RPC user
            VIACOIND_PASSWORD: RPC password
            VIACOIND_CA: CA certificate path
            VIACOIND_TIMEOUT: Transport timeout in seconds

        Returns:
            Configuration from environment.
        """
        return cls.from_dict({
            "url": os.getenv("VIACOIND_URL"),
            "scheme": os.getenv("VIACOIND_SCHEME"),
            "host": os.getenv("VIACOIND_HOST"),
            "port": os.getenv("VIACOIND_PORT"),
            "user": os.getenv("VIACOIND_USER"),
            "password": os.getenv("VIACOIND_PASSWORD"),
            "ca": os.getenv("VIACOIND_CA"),
            "timeout": os.getenv("VIACOIND_TIMEOUT"),
        })


def _expand_env(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        return os.environ.get(value[2:-1], "")
    return value
