"""viacoind JSON-RPC client.

Sync and async calls against a viacoind RPC endpoint, plus satoshi/coin
unit helpers.
"""

from .client import ViacoinClient
from .config import ClientConfig
from .exceptions import ConfigurationError, DaemonError, TransportError, ViacoinError
from .responses import ViacoindResponse
from .transport import HttpxTransport, Promise, Transport
from .units import to_btc, to_fixed, to_mbtc, to_satoshi, to_ubtc

__all__ = [
    "ViacoinClient",
    "ClientConfig",
    "ViacoindResponse",
    "Transport",
    "HttpxTransport",
    "Promise",
    "ViacoinError",
    "ConfigurationError",
    "DaemonError",
    "TransportError",
    "to_btc",
    "to_mbtc",
    "to_ubtc",
    "to_satoshi",
    "to_fixed",
]
__version__ = "0.1.0"
