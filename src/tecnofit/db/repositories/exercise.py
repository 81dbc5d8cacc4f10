"""Exercise repository for data access."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tecnofit.db.models import Exercise
from tecnofit.db.repositories.base import Repository

logger = logging.getLogger(__name__)


class ExerciseRepository(Repository[Exercise]):
    """Data access for Exercise entities."""

    def __init__(self, session: Session, per_page: int | None = None):
        super().__init__(Exercise, session, per_page=per_page)

    def find_by_training_id(self, training_id: int) -> list[Exercise]:
        """Get the exercises of a training, ordered by ID."""
        result = self.session.execute(
            select(Exercise).where(Exercise.training_id == training_id).order_by(Exercise.id)
        )
        return list(result.scalars().all())

    def delete_all_exercises_by_training_id(self, training_id: int) -> int:
        """Delete every exercise of a training and return how many were removed."""
        result = self.session.execute(
            delete(Exercise)
            .where(Exercise.training_id == training_id)
            .execution_options(synchronize_session="fetch")
        )
        self.session.flush()
        logger.debug(f"Deleted {result.rowcount} exercises of training {training_id}")
        return result.rowcount
