"""Base repository with transaction helpers.

Concrete repositories inherit from this and implement their domain contract.
"""

from sqlalchemy.orm import Session, scoped_session


class BaseRepository:
    """Holds the session shared with the query facade.

    Args:
        session: The SQLAlchemy session the repository's statements run on.
    """

    def __init__(self, session: Session | scoped_session):
        self._session = session

    def commit(self) -> None:
        """Commit the current transaction."""
        self._session.commit()

    def rollback(self) -> None:
        """Discard pending changes after a failed statement."""
        self._session.rollback()
