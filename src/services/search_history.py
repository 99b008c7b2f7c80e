"""Search history service: upsert of search terms and bounded retention."""

import logging
from datetime import UTC, datetime

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import InternalServerError
from src.models.search_history import SearchHistoryEntry

logger = logging.getLogger(__name__)

# Maximum number of entries kept per user
HISTORY_LIMIT = 25

# Dialect-specific INSERT constructs supporting ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SearchHistoryService:
    """Service for a user's search history.

    Each (user, term) pair is stored once. Searching a term again moves it to
    the front by refreshing created_at, so the history reads as a
    most-recently-used list. Only the newest HISTORY_LIMIT entries are kept;
    older ones are removed by a background trim after each insert.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_history_by_user_id(self, user_id: int) -> list[SearchHistoryEntry]:
        """Get the user's most recent entries, newest first."""
        logger.info(f"Fetching search history for user {user_id}")
        return (
            self.db.query(SearchHistoryEntry)
            .filter(SearchHistoryEntry.user_id == user_id)
            .order_by(SearchHistoryEntry.created_at.desc(), SearchHistoryEntry.id.desc())
            .limit(HISTORY_LIMIT)
            .all()
        )

    def find_history_entry_by_id(self, entry_id: int) -> SearchHistoryEntry | None:
        """Get an entry by primary key."""
        return self.db.query(SearchHistoryEntry).filter(SearchHistoryEntry.id == entry_id).first()

    def add_search_term(self, user_id: int, search_term: str) -> SearchHistoryEntry:
        """Insert a term, or refresh its timestamp if the user already searched it.

        The insert-or-update is a single statement so concurrent submissions
        of the same term cannot create duplicates. Trimming is queued
        afterwards and never affects the result.
        """
        logger.info(f"Saving search term for user {user_id}: {search_term!r}")

        insert = UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
        if insert is None:
            logger.error(f"Upsert not supported for dialect {self.db.get_bind().dialect.name}")
            raise InternalServerError()

        stmt = insert(SearchHistoryEntry).values(
            user_id=user_id,
            search_term=search_term,
            created_at=datetime.now(UTC),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[SearchHistoryEntry.user_id, SearchHistoryEntry.search_term],
            set_={"created_at": stmt.excluded.created_at},
        ).returning(SearchHistoryEntry.id)

        try:
            entry_id = self.db.execute(stmt).scalar_one()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving search term for user {user_id}: {e}")
            raise InternalServerError() from e

        entry = self.db.get(SearchHistoryEntry, entry_id)

        self._schedule_trim(user_id)

        return entry

    def remove_search_term(self, entry_id: int) -> int:
        """Delete an entry by primary key.

        Ownership must already have been checked by the caller.
        """
        logger.info(f"Removing search history entry {entry_id}")
        try:
            deleted = (
                self.db.query(SearchHistoryEntry)
                .filter(SearchHistoryEntry.id == entry_id)
                .delete(synchronize_session="fetch")
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error removing search history entry {entry_id}: {e}")
            raise InternalServerError() from e
        return deleted

    def trim_history(self, user_id: int) -> int:
        """Delete everything but the user's newest HISTORY_LIMIT entries.

        Safe to run repeatedly or concurrently for the same user; rows already
        gone are simply not deleted again.

        Returns:
            Number of deleted entries.
        """
        recent_ids = [
            entry_id
            for (entry_id,) in self.db.query(SearchHistoryEntry.id)
            .filter(SearchHistoryEntry.user_id == user_id)
            .order_by(SearchHistoryEntry.created_at.desc(), SearchHistoryEntry.id.desc())
            .limit(HISTORY_LIMIT)
            .all()
        ]

        # A partial page means the user is within the limit
        if len(recent_ids) < HISTORY_LIMIT:
            return 0

        deleted = (
            self.db.query(SearchHistoryEntry)
            .filter(
                SearchHistoryEntry.user_id == user_id,
                SearchHistoryEntry.id.notin_(recent_ids),
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()

        if deleted:
            logger.info(f"Trimmed {deleted} old search history entries for user {user_id}")
        return deleted

    def _schedule_trim(self, user_id: int) -> None:
        """Queue the retention trim without waiting for it."""
        from src.tasks.search_history import trim_search_history

        try:
            trim_search_history.delay(user_id)
        except Exception as e:
            logger.error(f"Could not queue search history trim for user {user_id}: {e}")
