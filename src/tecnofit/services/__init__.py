"""Service layer for business logic."""

from tecnofit.services.training import TrainingService

__all__ = [
    "TrainingService",
]
