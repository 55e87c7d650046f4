"""Exception hierarchy for the viacoind RPC client."""


class ViacoinError(RuntimeError):
    """Base error raised by the client.

    Attributes:
        code: Numeric error code. Daemon errors carry the JSON-RPC code,
            transport errors the HTTP status (0 when no response arrived).
    """

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code})"


class ConfigurationError(ViacoinError):
    """Connection string or options could not be understood."""


class TransportError(ViacoinError):
    """Failure below the JSON-RPC layer (HTTP error, bad body, no connection)."""


class DaemonError(ViacoinError):
    """The daemon processed the request and reported an error."""
