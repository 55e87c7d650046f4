"""Wrapper around a decoded viacoind JSON-RPC response."""

from collections.abc import Iterator
from typing import Any

import httpx

from .exceptions import DaemonError
from .models import RpcError

_MISSING = object()


class ViacoindResponse:
    """Decoded daemon response with path accessors over ``result``.

    Keys are dotted paths into the result: ``"tx.0"`` is the first
    transaction id of a ``getblock`` result, ``"vout.*.value"`` collects
    the value of every output of a decoded transaction.

    Example:
        response = client.getblock(block_hash)
        response.get("height")
        response.count("tx")
    """

    def __init__(self, body: dict[str, Any], response: httpx.Response | None = None) -> None:
        self._body = body
        self._response = response

    @property
    def body(self) -> dict[str, Any]:
        return self._body

    @property
    def response(self) -> httpx.Response | None:
        """Raw HTTP response, if the body came from one."""
        return self._response

    @property
    def status_code(self) -> int | None:
        return self._response.status_code if self._response is not None else None

    @property
    def id(self) -> Any:
        return self._body.get("id")

    def result(self) -> Any:
        return self._body.get("result")

    def error(self) -> RpcError | None:
        error = self._body.get("error")
        if error is None:
            return None
        if not isinstance(error, dict):
            return RpcError(code=0, message=str(error))
        return RpcError.from_dict(error)

    def has_result(self) -> bool:
        return self.result() is not None

    def has_error(self) -> bool:
        return self._body.get("error") is not None

    def raise_for_error(self) -> None:
        """Raise DaemonError if the body carries a non-null error."""
        error = self.error()
        if error is not None:
            raise DaemonError(error.message, error.code)

    def get(self, key: str | None = None, default: Any = None) -> Any:
        """Return the value at a dotted path in the result.

        Args:
            key: Dotted path; ``*`` fans out over every item of a list
                or dict. None returns the whole result.
            default: Returned when the path does not exist.
        """
        value = _lookup(self.result(), key)
        return default if value is _MISSING else value

    def exists(self, key: str) -> bool:
        """True if the path exists, even when its value is null."""
        return _lookup(self.result(), key) is not _MISSING

    def has(self, key: str) -> bool:
        """True if the path exists and is not null."""
        return self.get(key) is not None

    def contains(self, value: Any, key: str | None = None) -> bool:
        target = self.get(key)
        if isinstance(target, dict):
            return value in target.values()
        if isinstance(target, list):
            return value in target
        return target == value

    def keys(self, key: str | None = None) -> list[Any]:
        target = self.get(key)
        if isinstance(target, dict):
            return list(target.keys())
        if isinstance(target, list):
            return list(range(len(target)))
        return []

    def values(self, key: str | None = None) -> list[Any]:
        target = self.get(key)
        if isinstance(target, dict):
            return list(target.values())
        if isinstance(target, list):
            return list(target)
        return [] if target is None else [target]

    def first(self, key: str | None = None) -> Any:
        values = self.values(key)
        return values[0] if values else None

    def last(self, key: str | None = None) -> Any:
        values = self.values(key)
        return values[-1] if values else None

    def count(self, key: str | None = None) -> int:
        target = self.get(key)
        if isinstance(target, (dict, list)):
            return len(target)
        return 0 if target is None else 1

    def sum(self, key: str | None = None) -> float:
        return sum(v for v in self.values(key) if isinstance(v, (int, float)) and not isinstance(v, bool))

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __getitem__(self, key: str) -> Any:
        value = _lookup(self.result(), key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __repr__(self) -> str:
        return f"ViacoindResponse({self._body!r})"


def _lookup(data: Any, key: str | None) -> Any:
    if key is None:
        return data
    return _walk(data, key.split("."))


def _walk(data: Any, parts: list[str]) -> Any:
    if not parts:
        return data
    head, rest = parts[0], parts[1:]

    if head == "*":
        if isinstance(data, dict):
            items = list(data.values())
        elif isinstance(data, list):
            items = data
        else:
            return _MISSING
        found = [_walk(item, rest) for item in items]
        return [item for item in found if item is not _MISSING]

    if isinstance(data, dict):
        if head not in data:
            return _MISSING
        return _walk(data[head], rest)
    if isinstance(data, list):
        try:
            index = int(head)
        except ValueError:
            return _MISSING
        if not -len(data) <= index < len(data):
            return _MISSING
        return _walk(data[index], rest)
    return _MISSING
