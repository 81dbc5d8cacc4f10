"""Training repository for data access."""

from sqlalchemy.orm import Session

from tecnofit.db.models import Training
from tecnofit.db.repositories.base import Repository


class TrainingRepository(Repository[Training]):
    """Data access for Training entities."""

    def __init__(self, session: Session, per_page: int | None = None):
        super().__init__(Training, session, per_page=per_page)
