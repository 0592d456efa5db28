"""Identifier generation and UUID v4 syntax checks."""

import re
from uuid import uuid4

UUID_V4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def new_id() -> str:
    """Return a fresh RFC 4122 version 4 UUID in canonical string form."""
    return str(uuid4())


def is_uuid_v4(value: object) -> bool:
    """Return True if value is a string in canonical UUID v4 form."""
    return isinstance(value, str) and UUID_V4_PATTERN.fullmatch(value) is not None
