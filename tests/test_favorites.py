"""Tests for favorites endpoints and service."""

from unittest.mock import patch

import pytest
from sqlalchemy import delete

from src.exceptions import ConflictError
from src.models.favorite import Favorite
from src.models.user import User
from src.services.favorites import FavoritesService


def add_favorite(client, headers, pokemon_id):
    return client.post("/api/favorites", headers=headers, json={"pokemonId": pokemon_id})


def test_add_favorite(client, auth_headers):
    """Test adding a favorite."""
    response = add_favorite(client, auth_headers, 25)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Pokémon añadido a favoritos."
    assert body["data"]["pokemonId"] == 25
    assert body["data"]["userId"] == auth_headers.user_id
    assert "createdAt" in body["data"]


def test_list_favorites_newest_first(client, auth_headers):
    """Test listing favorites returns the user's entries, newest first."""
    for pokemon_id in (1, 4, 7):
        assert add_favorite(client, auth_headers, pokemon_id).status_code == 201

    response = client.get("/api/favorites", headers=auth_headers)
    assert response.status_code == 200
    assert [fav["pokemonId"] for fav in response.json()["data"]] == [7, 4, 1]


def test_favorites_are_per_user(client, auth_headers, other_auth_headers):
    """Test users only see their own favorites."""
    add_favorite(client, auth_headers, 25)

    response = client.get("/api/favorites", headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_add_duplicate_favorite(client, auth_headers):
    """Test adding the same Pokémon twice fails."""
    add_favorite(client, auth_headers, 25)

    response = add_favorite(client, auth_headers, 25)
    assert response.status_code == 409
    assert response.json()["message"] == "Este Pokémon ya está en tus favoritos."

    favorites = client.get("/api/favorites", headers=auth_headers).json()["data"]
    assert len(favorites) == 1


def test_same_pokemon_for_different_users(client, auth_headers, other_auth_headers):
    """Test two users can favorite the same Pokémon."""
    assert add_favorite(client, auth_headers, 25).status_code == 201
    assert add_favorite(client, other_auth_headers, 25).status_code == 201


@pytest.mark.parametrize("pokemon_id", [0, -3, "pikachu", None, True, "25", 2.5])
def test_add_favorite_invalid_pokemon_id(client, auth_headers, pokemon_id):
    """Test pokemonId must be a positive JSON integer, without coercion."""
    response = add_favorite(client, auth_headers, pokemon_id)
    assert response.status_code == 400
    assert response.json()["errors"]["pokemonId"] == [
        "El pokemonId es requerido y debe ser un número."
    ]


def test_add_favorite_requires_auth(client):
    """Test adding a favorite without a token."""
    response = client.post("/api/favorites", json={"pokemonId": 25})
    assert response.status_code == 401


def test_remove_favorite(client, auth_headers):
    """Test removing a favorite by entry id."""
    favorite_id = add_favorite(client, auth_headers, 25).json()["data"]["id"]

    response = client.delete(f"/api/favorites/{favorite_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Pokémon eliminado de favoritos."

    favorites = client.get("/api/favorites", headers=auth_headers).json()["data"]
    assert favorites == []

    # Can be added again once removed
    assert add_favorite(client, auth_headers, 25).status_code == 201


def test_remove_nonexistent_favorite(client, auth_headers):
    """Test removing an unknown favorite entry."""
    response = client.delete("/api/favorites/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Este Pokémon no se encontró en tus favoritos."


def test_remove_other_users_favorite(client, auth_headers, other_auth_headers):
    """Test a user cannot delete someone else's favorite."""
    favorite_id = add_favorite(client, auth_headers, 25).json()["data"]["id"]

    response = client.delete(f"/api/favorites/{favorite_id}", headers=other_auth_headers)
    assert response.status_code == 401
    assert response.json()["message"] == "No tienes permiso para eliminar este favorito."

    # The owner's favorite is untouched
    favorites = client.get("/api/favorites", headers=auth_headers).json()["data"]
    assert [fav["id"] for fav in favorites] == [favorite_id]


def test_remove_favorite_invalid_id(client, auth_headers):
    """Test the entry id in the path must be a positive integer."""
    response = client.delete("/api/favorites/abc", headers=auth_headers)
    assert response.status_code == 400


def test_add_favorite_concurrent_duplicate(db, auth_headers):
    """Test a unique constraint violation after the pre-check is still a conflict."""
    service = FavoritesService(db)
    service.add_favorite(auth_headers.user_id, 25)

    # Simulate a concurrent insert that slipped past the existence check
    with patch.object(service, "find_favorite", return_value=None):
        with pytest.raises(ConflictError) as exc_info:
            service.add_favorite(auth_headers.user_id, 25)

    assert exc_info.value.status_code == 409
    assert len(service.get_favorites_by_user_id(auth_headers.user_id)) == 1


def test_deleting_user_cascades_in_database(db, auth_headers):
    """Test ON DELETE CASCADE removes favorites when the user row goes away."""
    FavoritesService(db).add_favorite(auth_headers.user_id, 25)

    # Core delete bypasses the ORM relationship cascade
    db.execute(delete(User).where(User.id == auth_headers.user_id))
    db.commit()

    assert db.query(Favorite).filter(Favorite.user_id == auth_headers.user_id).count() == 0
