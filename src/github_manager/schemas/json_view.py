"""Read-only, default-tolerant view over a parsed JSON object.

Typed records are decoded by pydantic; ``JsonView`` covers the places where
callers (or a record's own validators) need to poke at a raw payload
without committing to a schema: error bodies, dynamic-key objects such as
workflow billing, and the ``JSON`` output format.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar, overload

from github_manager.core.exceptions import GitHubDecodeError

T = TypeVar("T")


def _is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonView(Mapping[str, Any]):
    """Immutable accessor over one JSON object snapshot.

    Missing keys, ``null`` values and values of the wrong JSON type all
    resolve to the accessor's default; nothing here raises once the
    document has been parsed.

        view = JsonView.parse('{"id": 42, "busy": true}')
        view.get_int("id")           # 42
        view.get_string("os")        # None
        view.get_bool("busy")        # True
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}

    @classmethod
    def parse(cls, text: str | bytes) -> JsonView:
        """
        Parse a JSON document whose top level must be an object.

        Args:
            text: Raw response body

        Returns:
            JsonView over the parsed object

        Raises:
            GitHubDecodeError: If the text is not valid JSON or not an object
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise GitHubDecodeError(f"Malformed JSON response: {e}") from e
        if not isinstance(data, dict):
            raise GitHubDecodeError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    # Mapping protocol
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"JsonView({self._data!r})"

    def has(self, key: str) -> bool:
        """True if the key is present with a non-null value."""
        return self._data.get(key) is not None

    def to_dict(self) -> dict[str, Any]:
        """Deep copy of the underlying object."""
        return copy.deepcopy(self._data)

    # Typed accessors
    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._data.get(key)
        return int(value) if _is_int(value) else default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._data.get(key)
        return float(value) if _is_number(value) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        return value if isinstance(value, bool) else default

    @overload
    def get_object(self, key: str) -> JsonView | None: ...

    @overload
    def get_object(self, key: str, default: T) -> JsonView | T: ...

    def get_object(self, key: str, default: Any = None) -> Any:
        """Nested object as a JsonView, or ``default`` when absent."""
        value = self._data.get(key)
        return JsonView(value) if isinstance(value, dict) else default

    @overload
    def get_array(self, key: str) -> list[Any] | None: ...

    @overload
    def get_array(self, key: str, default: T) -> list[Any] | T: ...

    def get_array(self, key: str, default: Any = None) -> Any:
        """Nested array (shallow copy), or ``default`` when absent."""
        value = self._data.get(key)
        return list(value) if isinstance(value, list) else default

    def get_list(self, key: str, item_type: type[T]) -> list[T]:
        """Array of primitives, keeping only elements of ``item_type``.

        An absent array yields an empty list, never None.
        """
        items = self.get_array(key, [])
        if item_type is int:
            return [int(item) for item in items if _is_int(item)]  # type: ignore[misc]
        if item_type is float:
            return [float(item) for item in items if _is_number(item)]  # type: ignore[misc]
        return [item for item in items if isinstance(item, item_type)]

    def accepts(self, key: str, expected: type) -> bool:
        """True if the value under ``key`` is usable as ``expected``.

        Used by the record base class to discard wrong-typed scalars so
        field defaults apply instead of validation errors.
        """
        if key not in self._data:
            return True
        value = self._data[key]
        if value is None:
            return True
        if expected is bool:
            return isinstance(value, bool)
        if expected is int:
            return _is_int(value)
        if expected is float:
            return _is_number(value)
        if expected is str:
            return isinstance(value, str)
        return True
