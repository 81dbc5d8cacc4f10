"""User repository for data access."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from tecnofit.db.models import User, UserRole
from tecnofit.db.repositories.base import Repository


class UserRepository(Repository[User]):
    """Data access for User entities."""

    def __init__(self, session: Session, per_page: int | None = None):
        super().__init__(User, session, per_page=per_page)

    def get_all_customers(self) -> list[User]:
        """Get all users with the customer role."""
        result = self.session.execute(
            select(User).where(User.role == UserRole.CUSTOMER.value).order_by(User.id)
        )
        return list(result.scalars().all())
