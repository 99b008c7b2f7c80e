"""Tests for search history endpoints, retention and the trim task."""

from datetime import datetime
from unittest.mock import MagicMock, patch

from src.models.search_history import SearchHistoryEntry
from src.services.search_history import HISTORY_LIMIT, SearchHistoryService
from src.tasks.search_history import trim_search_history


def add_term(client, headers, term):
    return client.post("/api/search-history", headers=headers, json={"searchTerm": term})


def test_add_search_term(client, auth_headers, history_trim_task):
    """Test recording a search term queues a trim."""
    response = add_term(client, auth_headers, "pikachu")
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Término de búsqueda guardado."
    assert body["data"]["searchTerm"] == "pikachu"
    assert body["data"]["userId"] == auth_headers.user_id

    history_trim_task.assert_called_once_with(auth_headers.user_id)


def test_add_search_term_invalid(client, auth_headers):
    """Test searchTerm must be a non-empty string."""
    for payload in ({}, {"searchTerm": ""}, {"searchTerm": 12}):
        response = client.post("/api/search-history", headers=auth_headers, json=payload)
        assert response.status_code == 400
        assert "searchTerm" in response.json()["errors"]


def test_repeated_term_is_bumped_not_duplicated(client, auth_headers):
    """Test searching a term again refreshes it instead of adding a row."""
    first = add_term(client, auth_headers, "pikachu").json()["data"]
    add_term(client, auth_headers, "eevee")
    second = add_term(client, auth_headers, "pikachu").json()["data"]

    assert second["id"] == first["id"]
    assert datetime.fromisoformat(second["createdAt"]) > datetime.fromisoformat(first["createdAt"])

    history = client.get("/api/search-history", headers=auth_headers).json()["data"]
    assert [entry["searchTerm"] for entry in history] == ["pikachu", "eevee"]


def test_history_newest_first(client, auth_headers, other_auth_headers):
    """Test history is per user and ordered newest first."""
    for term in ("bulbasaur", "charmander", "squirtle"):
        add_term(client, auth_headers, term)
    add_term(client, other_auth_headers, "mew")

    response = client.get("/api/search-history", headers=auth_headers)
    assert response.status_code == 200
    terms = [entry["searchTerm"] for entry in response.json()["data"]]
    assert terms == ["squirtle", "charmander", "bulbasaur"]


def test_history_keeps_newest_entries(client, db, auth_headers):
    """Test the oldest entry is evicted once the limit is exceeded."""
    for i in range(HISTORY_LIMIT + 1):
        assert add_term(client, auth_headers, f"term-{i}").status_code == 201

    stored = db.query(SearchHistoryEntry).filter_by(user_id=auth_headers.user_id).count()
    assert stored == HISTORY_LIMIT

    terms = [
        entry["searchTerm"]
        for entry in client.get("/api/search-history", headers=auth_headers).json()["data"]
    ]
    assert len(terms) == HISTORY_LIMIT
    assert terms[0] == f"term-{HISTORY_LIMIT}"
    assert "term-0" not in terms


def test_history_read_is_capped_before_trim(client, db, auth_headers, history_trim_task):
    """Test reads never return more than the limit, even if trims have not run."""
    history_trim_task.side_effect = None
    for i in range(HISTORY_LIMIT + 5):
        add_term(client, auth_headers, f"term-{i}")

    stored = db.query(SearchHistoryEntry).filter_by(user_id=auth_headers.user_id).count()
    assert stored == HISTORY_LIMIT + 5

    data = client.get("/api/search-history", headers=auth_headers).json()["data"]
    assert len(data) == HISTORY_LIMIT
    assert data[0]["searchTerm"] == f"term-{HISTORY_LIMIT + 4}"


def test_queue_failure_does_not_fail_request(client, auth_headers, history_trim_task):
    """Test the search term is saved even when the trim cannot be queued."""
    history_trim_task.side_effect = ConnectionError("broker unavailable")

    response = add_term(client, auth_headers, "pikachu")
    assert response.status_code == 201

    history = client.get("/api/search-history", headers=auth_headers).json()["data"]
    assert [entry["searchTerm"] for entry in history] == ["pikachu"]


def test_trim_history_within_limit(db, auth_headers):
    """Test trimming does nothing while the user is within the limit."""
    service = SearchHistoryService(db)
    for term in ("a", "b", "c"):
        service.add_search_term(auth_headers.user_id, term)

    assert service.trim_history(auth_headers.user_id) == 0
    assert len(service.get_history_by_user_id(auth_headers.user_id)) == 3


def test_trim_history_is_repeatable(db, auth_headers, history_trim_task):
    """Test a second trim after a first one deletes nothing more."""
    history_trim_task.side_effect = None
    service = SearchHistoryService(db)
    for i in range(HISTORY_LIMIT + 3):
        service.add_search_term(auth_headers.user_id, f"term-{i}")

    assert service.trim_history(auth_headers.user_id) == 3
    assert service.trim_history(auth_headers.user_id) == 0


def test_trim_task_reports_deleted_count(db, auth_headers, history_trim_task):
    """Test the Celery task body trims and reports the result."""
    history_trim_task.side_effect = None
    service = SearchHistoryService(db)
    for i in range(HISTORY_LIMIT + 2):
        service.add_search_term(auth_headers.user_id, f"term-{i}")

    with patch("src.tasks.search_history.SessionLocal", return_value=db):
        result = trim_search_history(auth_headers.user_id)

    assert result == {"success": True, "user_id": auth_headers.user_id, "deleted": 2}


def test_trim_task_swallows_errors():
    """Test storage errors in the task are logged and returned, not raised."""
    session = MagicMock()
    with (
        patch("src.tasks.search_history.SessionLocal", return_value=session),
        patch(
            "src.tasks.search_history.SearchHistoryService.trim_history",
            side_effect=RuntimeError("database is gone"),
        ),
    ):
        result = trim_search_history(1)

    assert result == {"error": "database is gone"}
    session.rollback.assert_called_once()
    session.close.assert_called_once()


def test_remove_search_term(client, auth_headers):
    """Test deleting a history entry."""
    entry_id = add_term(client, auth_headers, "pikachu").json()["data"]["id"]

    response = client.delete(f"/api/search-history/{entry_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Término de búsqueda eliminado."
    assert client.get("/api/search-history", headers=auth_headers).json()["data"] == []


def test_remove_nonexistent_search_term(client, auth_headers):
    """Test deleting an unknown history entry."""
    response = client.delete("/api/search-history/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Entrada de historial no encontrada."


def test_remove_other_users_search_term(client, auth_headers, other_auth_headers):
    """Test a user cannot delete someone else's history entry."""
    entry_id = add_term(client, auth_headers, "pikachu").json()["data"]["id"]

    response = client.delete(f"/api/search-history/{entry_id}", headers=other_auth_headers)
    assert response.status_code == 401
    assert response.json()["message"] == "No tienes permiso para eliminar esta entrada."

    history = client.get("/api/search-history", headers=auth_headers).json()["data"]
    assert [entry["id"] for entry in history] == [entry_id]
