"""Search criteria parsing.

Callers pass a flat mapping of field names to values, typically straight from
a query string. A value containing commas means "any of these":

    {"training_id": "1,2", "name": "Squat", "page": "2", "per_page": "5"}

is parsed into In("training_id", ("1", "2")) AND Equals("name", "Squat"),
page 2 with 5 items per page. The pagination keys never become filters.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import ColumnElement, inspect

from tecnofit.core.errors import InvalidCriteriaError

PAGE_KEY = "page"
PER_PAGE_KEY = "per_page"
PAGINATION_KEYS = frozenset({PAGE_KEY, PER_PAGE_KEY})
VALUE_SEPARATOR = ","
# Largest value the database accepts for LIMIT/OFFSET
MAX_SQL_INT = 2**63 - 1


def column_for(model: type, field: str) -> Any:
    """Return the mapped column attribute of `model` named `field`."""
    if field not in inspect(model).columns:
        raise InvalidCriteriaError(model.__name__, field)
    return getattr(model, field)


@dataclass(frozen=True)
class Equals:
    """field = value"""

    field: str
    value: Any

    def compile(self, model: type) -> ColumnElement[bool]:
        return column_for(model, self.field) == self.value


@dataclass(frozen=True)
class In:
    """field IN (values)"""

    field: str
    values: tuple[Any, ...]

    def compile(self, model: type) -> ColumnElement[bool]:
        return column_for(model, self.field).in_(self.values)


Filter = Equals | In


def parse_filter(field: str, value: Any) -> Filter:
    """Turn one criteria entry into a filter.

    Only strings are split; "a,b" becomes In(field, ("a", "b")) while "a"
    (or a non-string value) stays an equality.
    """
    if isinstance(value, str):
        tokens = value.split(VALUE_SEPARATOR)
        if len(tokens) > 1:
            return In(field, tuple(tokens))
    return Equals(field, value)


def _positive_int(value: Any) -> int | None:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if 0 < number <= MAX_SQL_INT else None


@dataclass(frozen=True)
class SearchCriteria:
    """Filters and pagination parsed from a raw criteria mapping."""

    filters: tuple[Filter, ...] = ()
    page: int = 1
    per_page: int = 15

    @classmethod
    def parse(
        cls,
        raw: Mapping[str, Any] | None,
        default_per_page: int = 15,
        page: int | None = None,
    ) -> "SearchCriteria":
        """Parse a criteria mapping.

        Args:
            raw: Field to value mapping, may contain `page` and `per_page`.
            default_per_page: Used when `per_page` is missing, empty or not a
                positive integer.
            page: Page number supplied by the caller; wins over `raw["page"]`.
                Missing or invalid page numbers resolve to 1.
        """
        raw = raw or {}
        per_page = _positive_int(raw.get(PER_PAGE_KEY)) or default_per_page
        resolved_page = _positive_int(page if page is not None else raw.get(PAGE_KEY)) or 1
        filters = tuple(
            parse_filter(field, value)
            for field, value in raw.items()
            if field not in PAGINATION_KEYS
        )
        return cls(filters=filters, page=resolved_page, per_page=per_page)

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.per_page

    def compile(self, model: type) -> list[ColumnElement[bool]]:
        """Compile every filter into a where clause for `model`."""
        return [f.compile(model) for f in self.filters]
