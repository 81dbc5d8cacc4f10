"""Database module for Tecnofit persistence."""

from tecnofit.db.models import (
    Base,
    Exercise,
    Training,
    User,
    UserRole,
)
from tecnofit.db.session import (
    create_tables,
    get_engine,
    get_session,
)

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Training",
    "Exercise",
    "get_engine",
    "get_session",
    "create_tables",
]
