"""SQLAlchemy models for Tecnofit."""

from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models.

    FILLABLE lists the attributes that may be mass-assigned from caller input.
    Anything else (ids, roles, timestamps) must be set explicitly.
    """

    FILLABLE: ClassVar[frozenset[str]] = frozenset()


class UserRole(str, Enum):
    """Roles a user can have in the gym."""

    ADMIN = "admin"
    PERSONAL = "personal"
    CUSTOMER = "customer"


class TimestampMixin:
    """created_at/updated_at columns maintained by the ORM."""

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC)
    )


class User(TimestampMixin, Base):
    """Gym user: administrators, personal trainers and customers."""

    __tablename__ = "users"

    FILLABLE = frozenset({"name", "email"})

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.CUSTOMER.value, index=True)

    # Relationships
    trainings: Mapped[list["Training"]] = relationship(back_populates="customer")

    def to_dict(self) -> dict:
        """Convert user to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }


class Training(TimestampMixin, Base):
    """A training plan, usually assigned to a customer."""

    __tablename__ = "trainings"

    FILLABLE = frozenset({"name", "description", "customer_id"})

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)

    # Relationships
    customer: Mapped["User | None"] = relationship(back_populates="trainings")
    exercises: Mapped[list["Exercise"]] = relationship(
        back_populates="training", order_by="Exercise.id"
    )

    def to_dict(self) -> dict:
        """Convert training to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "customer_id": self.customer_id,
        }


class Exercise(TimestampMixin, Base):
    """A single exercise inside a training."""

    __tablename__ = "exercises"

    FILLABLE = frozenset(
        {"name", "training_id", "series", "repetitions", "charge", "rest_seconds", "notes"}
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    training_id: Mapped[int | None] = mapped_column(
        ForeignKey("trainings.id"), nullable=True, index=True
    )
    series: Mapped[int] = mapped_column(default=3)
    repetitions: Mapped[int] = mapped_column(default=12)
    charge: Mapped[float | None] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=True)  # kg
    rest_seconds: Mapped[int] = mapped_column(default=60)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    training: Mapped["Training | None"] = relationship(back_populates="exercises")

    def to_dict(self) -> dict:
        """Convert exercise to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "training_id": self.training_id,
            "series": self.series,
            "repetitions": self.repetitions,
            "charge": self.charge,
            "rest_seconds": self.rest_seconds,
            "notes": self.notes,
        }
