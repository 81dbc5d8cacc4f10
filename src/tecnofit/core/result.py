"""Result type returned by the service layer."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tecnofit.core.errors import InvalidCriteriaError, NotFoundError, RepositoryError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: a value, or an error message with a code.

    Example:
        result = service.update_training(7, {"name": "Legs"})
        if result.is_err:
            return {"error": result.error, "code": result.code}
        training = result.unwrap()
    """

    _value: T | None = None
    _error: str | None = None
    _code: str | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(_value=value)

    @classmethod
    def err(cls, error: str, code: str = "error") -> "Result[T]":
        return cls(_error=error, _code=code)

    @classmethod
    def from_exception(cls, exc: RepositoryError) -> "Result[T]":
        """Map a repository exception onto an error result."""
        if isinstance(exc, NotFoundError):
            return cls.err(str(exc), code="not_found")
        if isinstance(exc, InvalidCriteriaError):
            return cls.err(str(exc), code="invalid_criteria")
        return cls.err(str(exc))

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def is_err(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def code(self) -> str | None:
        """Machine readable error code, None on success."""
        return self._code

    def unwrap(self) -> T:
        """Get the value, or raise ValueError if this is an error."""
        if self._error is not None:
            raise ValueError(self._error)
        return self._value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        if self._error is not None:
            return default
        return self._value  # type: ignore

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict.

        Errors become {"error": ..., "code": ...}; values with a to_dict()
        are converted, lists are converted item by item.
        """
        if self._error is not None:
            return {"error": self._error, "code": self._code}
        value = self._value
        if hasattr(value, "to_dict"):
            return value.to_dict()  # type: ignore
        if isinstance(value, dict):
            return value
        if isinstance(value, list):
            return {"data": [v.to_dict() if hasattr(v, "to_dict") else v for v in value]}
        return {"data": value}
