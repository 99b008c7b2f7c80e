"""Celery tasks for search history maintenance."""

import logging

from sqlalchemy.orm import Session

from src.celery_app import app as celery_app
from src.database import SessionLocal
from src.services.search_history import SearchHistoryService

logger = logging.getLogger(__name__)


@celery_app.task
def trim_search_history(user_id: int) -> dict:
    """Drop a user's search history entries beyond the retention limit.

    Best effort: errors are logged and swallowed, never retried. The next
    search by the same user queues another trim.

    Args:
        user_id: ID of the user whose history is trimmed

    Returns:
        dict with the number of deleted entries, or the error
    """
    db: Session = SessionLocal()
    try:
        deleted = SearchHistoryService(db).trim_history(user_id)
        return {"success": True, "user_id": user_id, "deleted": deleted}

    except Exception as e:
        logger.error(f"Non-fatal error trimming search history for user {user_id}: {e}", exc_info=True)
        db.rollback()
        return {"error": str(e)}

    finally:
        db.close()
