"""JSON codec for the item lists stored alongside recommendations."""

from __future__ import annotations

from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from weatherfit.common.errors import ItemListDecodeError

_ITEM_LIST = TypeAdapter(list[str])


def encode_items(items: Sequence[str]) -> str:
    """Serialise item names as a JSON array of strings."""

    return _ITEM_LIST.dump_json(list(items)).decode("utf-8")


def decode_items(payload: str | bytes | None) -> list[str]:
    """Parse a stored item list; blank input means no items."""

    if payload is None:
        return []
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if not payload.strip():
        return []
    try:
        return _ITEM_LIST.validate_json(payload, strict=True)
    except ValidationError as exc:
        raise ItemListDecodeError(f"stored item list is not a JSON array of strings: {payload!r}") from exc
