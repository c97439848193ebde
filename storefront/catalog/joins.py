"""Normalization of embedded one-to-one relations.

Rows coming back from the store may carry a related record (seller,
brand) either as a mapping or as a collection holding at most one
mapping, depending on how the relation was embedded. Every call site
goes through ``embedded()`` so the shape is decided in one place.
"""

from collections.abc import Mapping, Sequence
from typing import Any

Row = Mapping[str, Any]


def embedded(row: Row, field: str) -> dict[str, Any] | None:
    """Extract a one-to-one related record from a raw row.

    Args:
        row: Raw row as returned by the store.
        field: Name of the embedded relation (e.g. "seller").

    Returns:
        The related record as a new dict, or None when the field is
        missing, null, an empty collection or an empty mapping.
    """
    value = row.get(field)

    if value is None:
        return None

    if isinstance(value, Mapping):
        return dict(value) or None

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not value:
            return None
        first = value[0]
        return dict(first) if isinstance(first, Mapping) and first else None

    return None


def first_image(images: Any) -> str:
    """Pick the representative image from an image list.

    Args:
        images: Image URL list, possibly missing or empty.

    Returns:
        The first image URL, or an empty string.
    """
    if isinstance(images, Sequence) and not isinstance(images, (str, bytes)) and images:
        return str(images[0])
    return ""
