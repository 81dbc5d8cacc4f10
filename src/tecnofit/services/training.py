"""Training service for business logic."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.orm import Session

from tecnofit.core.errors import NotFoundError
from tecnofit.core.result import Result
from tecnofit.db.models import Training
from tecnofit.db.repositories import ExerciseRepository, TrainingRepository, UserRepository

logger = logging.getLogger(__name__)


class TrainingService:
    """Business logic for trainings and their exercises."""

    def __init__(self, session: Session):
        self.session = session
        self.training_repo = TrainingRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.user_repo = UserRepository(session)

    def _with_exercises(self, training: Training) -> dict:
        data = training.to_dict()
        data["exercises"] = [
            e.to_dict() for e in self.exercise_repo.find_by_training_id(training.id)
        ]
        return data

    def _exercise_rows(
        self, training_id: int, exercises: Sequence[Mapping[str, Any]]
    ) -> list[dict[str, Any]]:
        # training_id is forced so callers cannot attach exercises elsewhere
        return [{**exercise, "training_id": training_id} for exercise in exercises]

    def get_training(self, training_id: int) -> Result[dict]:
        """Get a training with its exercises."""
        training = self.training_repo.find(training_id)
        if training is None:
            logger.warning(f"Training {training_id} not found")
            return Result.err("Training not found", code="not_found")
        return Result.ok(self._with_exercises(training))

    def create_training(
        self, data: Mapping[str, Any], exercises: Sequence[Mapping[str, Any]] = ()
    ) -> Result[dict]:
        """Create a training together with its exercises."""
        training = self.training_repo.create(data)
        self.exercise_repo.insert(self._exercise_rows(training.id, exercises))
        logger.info(
            f"Training created: '{training.name}' "
            f"(id={training.id}, exercises={len(exercises)})"
        )
        return Result.ok(self._with_exercises(training))

    def update_training(self, training_id: int, data: Mapping[str, Any]) -> Result[dict]:
        """Update a training's fillable fields."""
        try:
            training = self.training_repo.update(training_id, data)
        except NotFoundError as e:
            return Result.from_exception(e)
        logger.info(f"Training {training_id} updated")
        return Result.ok(training.to_dict())

    def replace_exercises(
        self, training_id: int, exercises: Sequence[Mapping[str, Any]]
    ) -> Result[dict]:
        """Replace every exercise of a training with a new list."""
        training = self.training_repo.find(training_id)
        if training is None:
            logger.warning(f"Training {training_id} not found for exercise replacement")
            return Result.err("Training not found", code="not_found")

        deleted = self.exercise_repo.delete_all_exercises_by_training_id(training_id)
        self.exercise_repo.insert(self._exercise_rows(training_id, exercises))
        self.session.expire(training, ["exercises"])
        logger.info(
            f"Training {training_id} exercises replaced: -{deleted} +{len(exercises)}"
        )

        return Result.ok({
            "status": "exercises_replaced",
            "deleted": deleted,
            "inserted": len(exercises),
            "training": self._with_exercises(training),
        })

    def list_customers(self) -> Result[list[dict]]:
        """List every customer."""
        return Result.ok([u.to_dict() for u in self.user_repo.get_all_customers()])
