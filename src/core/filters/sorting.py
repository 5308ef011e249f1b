"""Sort field and direction whitelisting."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pymongo import ASCENDING, DESCENDING

from core.utils.constants import DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER


def normalize_sort_field(raw: Any, allowed: tuple[str, ...]) -> str:
    """Return ``raw`` when it is a whitelisted field name, else the creation time."""
    if isinstance(raw, str) and raw in allowed:
        return raw
    return DEFAULT_SORT_FIELD


def normalize_sort_order(raw: Any) -> str:
    """Return ``"asc"`` or ``"desc"``; anything unrecognized sorts descending."""
    if raw == "asc":
        return "asc"
    if raw == "desc":
        return "desc"
    return DEFAULT_SORT_ORDER


class SortSpec(BaseModel):
    """A normalized sort key.

    ``_id`` in the same direction is appended as a tie-break so that
    equal keys come back in a repeatable order.
    """

    model_config = ConfigDict(frozen=True)

    field: str = DEFAULT_SORT_FIELD
    order: str = DEFAULT_SORT_ORDER

    @classmethod
    def from_raw(cls, field: Any, order: Any, *, allowed: tuple[str, ...]) -> "SortSpec":
        return cls(
            field=normalize_sort_field(field, allowed),
            order=normalize_sort_order(order),
        )

    @property
    def direction(self) -> int:
        return ASCENDING if self.order == "asc" else DESCENDING

    def to_cursor_sort(self) -> list[tuple[str, int]]:
        """Sort argument for ``Cursor.sort``."""
        keys = [(self.field, self.direction)]
        if self.field != "_id":
            keys.append(("_id", self.direction))
        return keys

    def to_stage(self) -> dict[str, Any]:
        """``$sort`` aggregation stage."""
        return {"$sort": dict(self.to_cursor_sort())}
