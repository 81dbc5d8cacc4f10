"""Exceptions raised by the data-access layer."""


class RepositoryError(Exception):
    """Base exception for repository operations."""

    pass


class NotFoundError(RepositoryError):
    """Raised when an entity required by an operation does not exist."""

    def __init__(self, model_name: str, entity_id: int):
        self.model_name = model_name
        self.entity_id = entity_id
        super().__init__(f"{model_name} with id {entity_id} not found")


class InvalidCriteriaError(RepositoryError, ValueError):
    """Raised when a filter names a field that is not a mapped column."""

    def __init__(self, model_name: str, field: str):
        self.model_name = model_name
        self.field = field
        super().__init__(f"{model_name} has no column '{field}'")
