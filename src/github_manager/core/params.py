"""Ordered key/value container for query strings and JSON payloads."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Self
from urllib.parse import urlencode


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_query_value(item) for item in value)
    return str(value)


class Params(dict[str, Any]):
    """Insertion-ordered parameters for a single request.

    Used both for query strings (pagination, filters) and for JSON request
    bodies. ``None`` values are kept in the container but never sent.

    Usage:
        params = Params(per_page=50).add("page", 2)
        params.to_query_string()  # "?per_page=50&page=2"
    """

    def add(self, key: str, value: Any) -> Self:
        """Set a parameter and return the container for chaining."""
        self[key] = value
        return self

    def add_all(self, values: Mapping[str, Any] | None) -> Self:
        """Merge another mapping into this one, keeping insertion order."""
        if values:
            self.update(values)
        return self

    def as_pairs(self) -> list[tuple[str, str]]:
        """Render as ordered ``(key, value)`` string pairs, skipping ``None``."""
        return [(key, _query_value(value)) for key, value in self.items() if value is not None]

    def to_query_string(self) -> str:
        """Render as a URL-encoded query string with leading ``?`` (or ``""``)."""
        pairs = self.as_pairs()
        if not pairs:
            return ""
        return "?" + urlencode(pairs)

    def to_payload(self) -> dict[str, Any]:
        """Render as a JSON-ready request body, skipping ``None`` values."""
        return {key: _payload_value(value) for key, value in self.items() if value is not None}

    @classmethod
    def of(cls, values: Mapping[str, Any] | None = None, **extra: Any) -> Self:
        """
        Factory method combining an optional mapping with keyword parameters.

        Args:
            values: Existing parameters (a Params, dict or None)
            **extra: Additional parameters appended after ``values``

        Returns:
            A new Params instance
        """
        params = cls()
        params.add_all(values)
        params.add_all(extra)
        return params


def _payload_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_payload_value(item) for item in value]
    if isinstance(value, Mapping):
        return {k: _payload_value(v) for k, v in value.items() if v is not None}
    return value
