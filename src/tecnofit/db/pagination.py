"""Paginated query results."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of entities plus the metadata needed to request the others."""

    items: list[T] = field(default_factory=list)
    page: int = 1
    per_page: int = 15
    total: int = 0

    @property
    def last_page(self) -> int:
        """Number of the last page (at least 1, even when empty)."""
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_more(self) -> bool:
        return self.page < self.last_page

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def to_dict(self) -> dict[str, Any]:
        """Convert page to dictionary for API responses."""
        return {
            "data": [
                item.to_dict() if hasattr(item, "to_dict") else item for item in self.items
            ],
            "page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
        }
