"""Base classes mapping GitHub JSON snapshots onto immutable records.

Decoding rules shared by every record:

- ``null`` values and missing keys fall back to the field default
- a scalar (or array/object) of the wrong JSON type is treated as absent
- unknown keys are ignored
- the instance is frozen once built

``GitHubModel.from_json`` additionally keeps the decoded source object,
available as ``record.source``.
"""

from __future__ import annotations

import json
import types
from collections.abc import Iterator, Mapping, Sequence
from datetime import UTC, datetime
from functools import cache
from typing import Any, ClassVar, Self, TypeVar, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    TypeAdapter,
    ValidationInfo,
    model_validator,
)

from github_manager.core.exceptions import GitHubDecodeError

from .json_view import JsonView

T = TypeVar("T")

KEEP_SOURCE = "keep_source"
"""Validation context flag: store the raw object on each decoded record."""

_SCALARS: tuple[type, ...] = (bool, int, float, str)


def load_json(payload: str | bytes | Mapping[str, Any] | Sequence[Any]) -> Any:
    """
    Parse a response body, passing already-parsed objects through.

    Args:
        payload: Raw response text/bytes, or a dict/list

    Returns:
        The parsed JSON value

    Raises:
        GitHubDecodeError: If the text is not valid JSON
    """
    if not isinstance(payload, (str, bytes)):
        return payload
    try:
        return json.loads(payload)
    except ValueError as e:
        raise GitHubDecodeError(f"Malformed JSON response: {e}") from e


def epoch_millis(value: str | None) -> int:
    """Convert an ISO-8601 timestamp to epoch milliseconds (-1 if absent/invalid)."""
    if not value:
        return -1
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return -1
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp() * 1000)


def timestamp_property(field_name: str) -> property:
    """Build a ``<field>_timestamp`` property over an ISO-8601 string field."""

    def getter(self: BaseModel) -> int:
        return epoch_millis(getattr(self, field_name))

    return property(getter, doc=f"``{field_name}`` as epoch milliseconds, or -1.")


def _json_kind(annotation: Any) -> type | None:
    """JSON type a field expects, when it is a plain scalar, array or object."""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            return None
        return _json_kind(args[0])
    if annotation in _SCALARS:
        return annotation
    if origin is list or annotation is list:
        return list
    if origin is dict or annotation is dict:
        return dict
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return dict
    return None


@cache
def _field_kinds(model: type[BaseModel]) -> tuple[tuple[str, str, type], ...]:
    kinds = []
    for name, field in model.model_fields.items():
        kind = _json_kind(field.annotation)
        if kind is not None:
            kinds.append((field.alias or name, name, kind))
    return tuple(kinds)


def _usable(view: JsonView, key: str, kind: type) -> bool:
    if kind in _SCALARS:
        return view.accepts(key, kind)
    value = view[key]
    if kind is list:
        return isinstance(value, (list, tuple))
    return isinstance(value, (dict, BaseModel))


class GitHubModel(BaseModel):
    """Base for every record decoded from a GitHub JSON object."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    _source: Mapping[str, Any] | None = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _decode_snapshot(
        cls, data: Any, handler: ModelWrapValidatorHandler[Self], info: ValidationInfo
    ) -> Self:
        if not isinstance(data, Mapping):
            return handler(data)

        view = JsonView(data)
        cleaned = dict(data)
        for alias, name, kind in _field_kinds(cls):
            for key in {alias, name}:
                if key not in cleaned:
                    continue
                if cleaned[key] is None or not _usable(view, key, kind):
                    del cleaned[key]

        instance = handler(cleaned)
        if info.context and info.context.get(KEEP_SOURCE):
            instance._source = data
        return instance

    @property
    def source(self) -> JsonView | None:
        """The JSON object this record was decoded from (None if built in code)."""
        if self._source is None:
            return None
        return JsonView(self._source)

    @classmethod
    def from_json(cls, payload: str | bytes | Mapping[str, Any]) -> Self:
        """
        Factory method to decode one JSON object into a record.

        Args:
            payload: Response text, or an already-parsed dict

        Returns:
            Record instance keeping the payload as its ``source``

        Raises:
            GitHubDecodeError: If the payload is not a JSON object
            pydantic.ValidationError: If a strict field holds an unknown value
        """
        data = load_json(payload)
        if not isinstance(data, Mapping):
            raise GitHubDecodeError(f"Expected a JSON object, got {type(data).__name__}")
        return cls.model_validate(data, context={KEEP_SOURCE: True})

    @classmethod
    def list_from_json(cls, payload: str | bytes | Sequence[Any]) -> list[Self]:
        """Decode a top-level JSON array of objects, preserving order."""
        return decode(payload, list[cls])  # type: ignore[valid-type]


class GitHubResponse(GitHubModel):
    """Top-level response record carrying the GitHub error envelope."""

    message: str | None = Field(default=None, description="Error message, if any")
    documentation_url: str | None = Field(
        default=None, description="Link to the documentation for the error"
    )

    @property
    def instantiated_with_error(self) -> bool:
        """True when GitHub answered with an error envelope."""
        return self.message is not None


class GitHubList(GitHubResponse):
    """Paged list response: ``total_count`` plus one array of records.

    Subclasses declare the array field and name it in ``items_key``:

        class SecretsList(GitHubList):
            items_key: ClassVar[str] = "secrets"
            secrets: list[Secret] = Field(default_factory=list)

    ``total_count`` is what GitHub reports across all pages, so it may be
    larger than ``len(the_list)``. Truthiness follows the whole collection:
    an empty page of a non-empty collection is still truthy.
    """

    items_key: ClassVar[str] = "items"

    total_count: int = Field(default=0, description="Total number of items across pages")

    @property
    def items(self) -> list[Any]:
        """The records of this page, in response order."""
        return getattr(self, self.items_key)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return self.total_count > 0 or bool(self.items)

    @classmethod
    def from_items(cls, items: Sequence[Any], total_count: int | None = None) -> Self:
        """
        Factory method to build a list from already-decoded records.

        Args:
            items: Records to hold, in order
            total_count: Reported total (defaults to ``len(items)``)

        Returns:
            List record without a JSON source
        """
        return cls.model_validate(
            {
                "total_count": len(items) if total_count is None else total_count,
                cls.items_key: list(items),
            }
        )


@cache
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(payload: str | bytes | Mapping[str, Any] | Sequence[Any], target: type[T]) -> T:
    """
    Decode a response body into ``target``.

    ``target`` is a record class or a container of records such as
    ``list[Release]``.

    Raises:
        GitHubDecodeError: If the body is not valid JSON
        pydantic.ValidationError: If the body does not fit ``target``
    """
    if isinstance(target, type) and issubclass(target, GitHubModel):
        return target.from_json(payload)  # type: ignore[return-value]
    data = load_json(payload)
    return _adapter(target).validate_python(data, context={KEEP_SOURCE: True})
