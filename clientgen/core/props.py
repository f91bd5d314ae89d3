"""Parameter list rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def to_object_string(items: Iterable[Any], attribute: str | None = None) -> str:
    """Render items (or one attribute of each item) as a comma separated list.

    Props rendered by "implementation" give e.g. "petId: string, params?: ListPetsParams".
    """
    values = [getattr(item, attribute) if attribute else item for item in items]
    return ", ".join(str(value) for value in values if value)
