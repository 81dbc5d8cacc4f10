"""Repository layer for data access."""

from tecnofit.db.repositories.base import Repository
from tecnofit.db.repositories.exercise import ExerciseRepository
from tecnofit.db.repositories.training import TrainingRepository
from tecnofit.db.repositories.user import UserRepository

__all__ = [
    "Repository",
    "ExerciseRepository",
    "TrainingRepository",
    "UserRepository",
]
