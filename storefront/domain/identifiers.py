"""Identifier helpers."""

import re

# 8-4-4-4-12 hex groups, version 1-5, RFC 4122 variant
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Any value a Postgres uuid column accepts in canonical text form
UUID_SHAPE_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid(value: str) -> bool:
    """Check whether a string is a canonical textual UUID.

    Used to tell brand IDs from brand names.

    Args:
        value: Candidate identifier.

    Returns:
        True if the value matches the canonical UUID pattern.
    """
    return bool(UUID_PATTERN.fullmatch(value))


def is_uuid_shaped(value: str) -> bool:
    """Check whether a string can be stored in a uuid column.

    Accepts any hex digits in the 8-4-4-4-12 layout, whatever the
    version and variant nibbles.
    """
    return bool(UUID_SHAPE_PATTERN.fullmatch(value))
