"""JSON-RPC 1.0 request and error models used on the wire to viacoind."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RpcError:
    """JSON-RPC error object.

    Attributes:
        code: Error code reported by the daemon, 0 when it is not an integer.
        message: Error description.
    """

    code: int
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RpcError":
        try:
            code = int(data.get("code") or 0)
        except (TypeError, ValueError):
            code = 0
        return cls(code=code, message=str(data.get("message", "")))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True, slots=True)
class RpcRequest:
    """JSON-RPC request object.

    Attributes:
        method: Lowercase daemon method name.
        params: Positional parameters.
        id: Request identifier for correlation.
        jsonrpc: Protocol version string passed through to the daemon.
    """

    method: str
    params: tuple[Any, ...] = ()
    id: str = "0"
    jsonrpc: str = "1.0"

    def __post_init__(self) -> None:
        if not self.method:
            raise ValueError("Method is required")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body sent to the daemon."""
        return {
            "method": self.method,
            "params": list(self.params),
            "jsonrpc": self.jsonrpc,
            "id": self.id,
        }
