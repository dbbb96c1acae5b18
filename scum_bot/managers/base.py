"""Base manager class with common patterns."""

from sqlalchemy.orm import Session


class BaseManager:
    """Base class for all managers.

    Managers wrap a database session; they never commit it. The caller
    owns the transaction (see get_db_session).
    """

    def __init__(self, db: Session) -> None:
        """Initialize manager with a database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
