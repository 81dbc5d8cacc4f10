"""Generic repository providing CRUD and criteria search for one model."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from tecnofit.config import get_settings
from tecnofit.core.errors import NotFoundError
from tecnofit.db.criteria import SearchCriteria, column_for
from tecnofit.db.models import Base
from tecnofit.db.pagination import Page

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class Repository(Generic[T]):
    """Data access for a single model class.

    Repositories flush but never commit; the caller owns the transaction
    (see tecnofit.db.session.get_session).
    """

    def __init__(self, model: type[T], session: Session, per_page: int | None = None):
        self.model = model
        self.session = session
        self.per_page = per_page or get_settings().default_per_page

    def get_model(self) -> type[T]:
        """Get the model class this repository serves."""
        return self.model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def fillable(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Keep only the keys the model allows to be mass-assigned."""
        allowed = self.model.FILLABLE
        dropped = [key for key in data if key not in allowed]
        if dropped:
            logger.debug(f"{self.model_name}: ignoring non-fillable fields {sorted(dropped)}")
        return {key: value for key, value in data.items() if key in allowed}

    def _ordered(self):
        return select(self.model).order_by(*self.model.__mapper__.primary_key)

    def all(self) -> list[T]:
        """Get every entity, ordered by primary key."""
        result = self.session.execute(self._ordered())
        return list(result.scalars().all())

    def find(self, entity_id: int) -> T | None:
        """Get an entity by ID, or None if it does not exist."""
        return self.session.get(self.model, entity_id)

    def find_one_by(self, criteria: Mapping[str, Any]) -> T | None:
        """Get the first entity whose fields equal every value in `criteria`."""
        query = self._ordered()
        for field, value in criteria.items():
            query = query.where(column_for(self.model, field) == value)
        result = self.session.execute(query.limit(1))
        return result.scalars().first()

    def find_in(self, key: str, values: Iterable[Any]) -> list[T]:
        """Get all entities whose `key` field is one of `values`."""
        query = self._ordered().where(column_for(self.model, key).in_(list(values)))
        result = self.session.execute(query)
        return list(result.scalars().all())

    def find_by(
        self, criteria: Mapping[str, Any] | None = None, page: int | None = None
    ) -> Page[T]:
        """Search entities by criteria and return one page of results.

        Comma separated values match any of the listed values; everything
        else is an exact match. All conditions are combined with AND.

        Args:
            criteria: Field to value mapping, with optional `page`/`per_page`.
            page: Current page number; defaults to `criteria["page"]`, then 1.
        """
        search = SearchCriteria.parse(criteria, default_per_page=self.per_page, page=page)
        clauses = search.compile(self.model)

        count_query = select(func.count()).select_from(self.model).where(*clauses)
        total = self.session.execute(count_query).scalar_one()

        # Past the last row; also keeps offsets beyond 64 bits out of the query
        if search.offset >= total:
            return Page(items=[], page=search.page, per_page=search.per_page, total=total)

        query = (
            self._ordered()
            .where(*clauses)
            .offset(search.offset)
            .limit(search.per_page)
        )
        items = list(self.session.execute(query).scalars().all())
        return Page(items=items, page=search.page, per_page=search.per_page, total=total)

    def create(self, data: Mapping[str, Any]) -> T:
        """Create an entity from the fillable fields of `data`."""
        entity = self.model(**self.fillable(data))
        self.session.add(entity)
        self.session.flush()
        logger.debug(f"{self.model_name} created (id={entity.id})")
        return entity

    def insert(self, rows: Sequence[Mapping[str, Any]]) -> bool:
        """Bulk insert rows, keeping only fillable fields of each one."""
        values = [self.fillable(row) for row in rows]
        if not values:
            return True
        self.session.execute(insert(self.model), values)
        self.session.flush()
        logger.debug(f"{self.model_name}: bulk inserted {len(values)} rows")
        return True

    def update(self, entity_id: int, data: Mapping[str, Any]) -> T:
        """Update the fillable fields of an existing entity.

        Raises:
            NotFoundError: If no entity has this ID.
        """
        entity = self.find(entity_id)
        if entity is None:
            logger.warning(f"{self.model_name} {entity_id} not found for update")
            raise NotFoundError(self.model_name, entity_id)

        for key, value in self.fillable(data).items():
            setattr(entity, key, value)

        self.session.flush()
        return entity

    def delete(self, entity: T) -> bool:
        """Delete an entity."""
        entity_id = entity.id
        self.session.delete(entity)
        self.session.flush()
        logger.debug(f"{self.model_name} deleted (id={entity_id})")
        return True
