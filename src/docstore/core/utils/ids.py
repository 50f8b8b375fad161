"""Document id generation"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 in canonical string form."""
    return str(uuid4())


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()
