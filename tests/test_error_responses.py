"""
Tests for failure paths that a healthy database cannot produce.

The franchise service is swapped for one built on in-memory repositories.
"""
import pytest
from sqlalchemy.orm.exc import StaleDataError

from movie_character_api.api.v1.dependencies import get_franchise_service
from movie_character_api.application.services.franchise_service import FranchiseService
from movie_character_api.domain.models import Franchise, Movie


@pytest.fixture
def override_franchise_service(client):
    """Serve franchise endpoints from the given repositories."""

    def _override(franchises, movies):
        service = FranchiseService(franchise_repository=franchises, movie_repository=movies)
        client.app.dependency_overrides[get_franchise_service] = lambda: service

    yield _override
    client.app.dependency_overrides.pop(get_franchise_service, None)


def test_create_commit_failure_is_500(client, override_franchise_service, memory_repositories, failing_commit):
    franchises, movies, _ = memory_repositories()
    franchises.save_error = failing_commit
    override_franchise_service(franchises, movies)

    response = client.post("/api/franchise", json={"name": "Marvel"})

    assert response.status_code == 500
    assert "location" not in response.headers


def test_vanished_movie_during_traversal_is_400(client, override_franchise_service, memory_repositories):
    franchise = Franchise(id=1, name="Marvel", movies=[Movie(id=10, title="Gone")])
    franchises, movies, _ = memory_repositories(franchises=[franchise])
    override_franchise_service(franchises, movies)

    response = client.get("/api/franchise/charactersByFranchise/1")

    assert response.status_code == 400


def test_update_conflict_on_existing_row_propagates(client, override_franchise_service, memory_repositories):
    franchises, movies, _ = memory_repositories(franchises=[Franchise(id=1, name="DC")])
    franchises.save_error = StaleDataError("0 rows matched")
    override_franchise_service(franchises, movies)

    with pytest.raises(StaleDataError):
        client.put("/api/franchise/1", json={"id": 1, "name": "DCEU"})


def test_non_integer_id_is_400(client):
    assert client.get("/api/franchise/abc").status_code == 400


def test_assign_requires_list_body(client, seed):
    (franchise,) = seed(Franchise(name="Pixar"))

    response = client.post(f"/api/franchise/movie/{franchise.id}", json={"movies": [1]})

    assert response.status_code == 400


def test_root_health(client):
    data = client.get("/").json()

    assert data["status"] == "running"
    assert data["docs"] == "/docs"
