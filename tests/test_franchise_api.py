"""
Tests for the franchise endpoints.

Covers CRUD status codes, the association traversal and movie assignment.
"""
from movie_character_api.domain.models import Character, Franchise, Movie

OUT_OF_RANGE_IDS = (2**63, -(2**63), 2**31)


class TestFranchiseQueries:
    """GET /api/franchise and /api/franchise/{id}."""

    def test_list_empty(self, client):
        response = client.get("/api/franchise")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_flattens_movies_into_ids(self, client, marvel):
        response = client.get("/api/franchise")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Marvel"
        assert data[0]["movies"] == [m.id for m in marvel["movies"]]

    def test_get_by_id_returns_stored_fields(self, client, marvel):
        franchise = marvel["franchise"]

        response = client.get(f"/api/franchise/{franchise.id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": franchise.id,
            "name": "Marvel",
            "description": "Marvel Cinematic Universe",
            "movies": [m.id for m in marvel["movies"]],
        }

    def test_get_missing_is_404(self, client):
        response = client.get("/api/franchise/999")

        assert response.status_code == 404

    def test_get_id_beyond_integer_range_is_404(self, client):
        for franchise_id in OUT_OF_RANGE_IDS:
            assert client.get(f"/api/franchise/{franchise_id}").status_code == 404


class TestFranchiseMutations:
    """POST, PUT and DELETE."""

    def test_create_then_get(self, client):
        response = client.post(
            "/api/franchise",
            json={"name": "Star Wars", "description": "A galaxy far, far away"},
        )

        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Star Wars"
        assert created["movies"] == []
        assert response.headers["location"].endswith(f"/api/franchise/{created['id']}")

        fetched = client.get(f"/api/franchise/{created['id']}").json()
        assert fetched["name"] == "Star Wars"
        assert fetched["description"] == "A galaxy far, far away"

    def test_create_rejects_long_name(self, client):
        response = client.post("/api/franchise", json={"name": "x" * 51})

        assert response.status_code == 400

    def test_update_replaces_fields(self, client, seed):
        (franchise,) = seed(Franchise(name="DC", description="Detective Comics"))

        response = client.put(
            f"/api/franchise/{franchise.id}",
            json={"id": franchise.id, "name": "DCEU", "description": None},
        )

        assert response.status_code == 204
        fetched = client.get(f"/api/franchise/{franchise.id}").json()
        assert fetched["name"] == "DCEU"
        assert fetched["description"] is None

    def test_update_keeps_movies(self, client, marvel):
        franchise = marvel["franchise"]

        response = client.put(
            f"/api/franchise/{franchise.id}",
            json={"id": franchise.id, "name": "MCU", "description": "Renamed"},
        )

        assert response.status_code == 204
        fetched = client.get(f"/api/franchise/{franchise.id}").json()
        assert fetched["movies"] == [m.id for m in marvel["movies"]]

    def test_update_id_mismatch_is_400_and_changes_nothing(self, client, seed):
        (franchise,) = seed(Franchise(name="DC", description="Detective Comics"))

        response = client.put(
            f"/api/franchise/{franchise.id}",
            json={"id": franchise.id + 1, "name": "Changed", "description": "Changed"},
        )

        assert response.status_code == 400
        fetched = client.get(f"/api/franchise/{franchise.id}").json()
        assert fetched["name"] == "DC"
        assert fetched["description"] == "Detective Comics"

    def test_update_missing_is_404(self, client):
        response = client.put(
            "/api/franchise/999",
            json={"id": 999, "name": "Ghost", "description": None},
        )

        assert response.status_code == 404

    def test_delete_then_get_is_404(self, client, seed):
        (franchise,) = seed(Franchise(name="DC"))

        response = client.delete(f"/api/franchise/{franchise.id}")

        assert response.status_code == 204
        assert client.get(f"/api/franchise/{franchise.id}").status_code == 404

    def test_delete_detaches_movies(self, client, marvel):
        franchise = marvel["franchise"]
        movie = marvel["movies"][0]

        assert client.delete(f"/api/franchise/{franchise.id}").status_code == 204

        fetched = client.get(f"/api/movie/{movie.id}")
        assert fetched.status_code == 200
        assert fetched.json()["franchise"] is None

    def test_delete_missing_is_404(self, client):
        assert client.delete("/api/franchise/999").status_code == 404

    def test_delete_id_beyond_integer_range_is_404(self, client):
        assert client.delete(f"/api/franchise/{2**63}").status_code == 404

    def test_update_id_beyond_integer_range_is_400(self, client):
        response = client.put(f"/api/franchise/{2**63}", json={"id": 2**63, "name": "Ghost"})

        assert response.status_code == 400


class TestFranchiseAssociations:
    """Movies and characters reachable from a franchise."""

    def test_movies_by_franchise(self, client, marvel):
        franchise = marvel["franchise"]

        response = client.get(f"/api/franchise/moviesByFranchise/{franchise.id}")

        assert response.status_code == 200
        titles = [movie["title"] for movie in response.json()]
        assert titles == ["Iron Man", "The Avengers"]
        assert all(movie["franchise"] == franchise.id for movie in response.json())

    def test_movies_by_franchise_empty(self, client, seed):
        (franchise,) = seed(Franchise(name="Empty"))

        response = client.get(f"/api/franchise/moviesByFranchise/{franchise.id}")

        assert response.status_code == 200
        assert response.json() == []

    def test_movies_by_missing_franchise_is_404(self, client):
        assert client.get("/api/franchise/moviesByFranchise/999").status_code == 404

    def test_characters_by_franchise_keeps_duplicates(self, client, marvel):
        franchise = marvel["franchise"]
        iron_man, cap = marvel["characters"]

        response = client.get(f"/api/franchise/charactersByFranchise/{franchise.id}")

        assert response.status_code == 200
        ids = [character["id"] for character in response.json()]
        # Iron Man appears in both movies and is listed once per movie
        assert ids == [iron_man.id, iron_man.id, cap.id]

    def test_characters_by_franchise_single_movie(self, client, seed):
        character = Character(full_name="Iron Man")
        movie = Movie(title="Iron Man", characters=[character])
        (franchise,) = seed(Franchise(name="Marvel", movies=[movie]))

        response = client.get(f"/api/franchise/charactersByFranchise/{franchise.id}")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": character.id,
                "fullName": "Iron Man",
                "alias": None,
                "gender": None,
                "picture": None,
                "movies": [movie.id],
            }
        ]

    def test_characters_by_missing_franchise_is_404(self, client):
        assert client.get("/api/franchise/charactersByFranchise/999").status_code == 404

    def test_assign_skips_unknown_ids(self, client, seed):
        franchise, movie = seed(Franchise(name="Pixar"), Movie(title="Toy Story"))

        response = client.post(f"/api/franchise/movie/{franchise.id}", json=[movie.id, 999])

        assert response.status_code == 204
        fetched = client.get(f"/api/franchise/{franchise.id}").json()
        assert fetched["movies"] == [movie.id]

    def test_assign_is_idempotent_for_present_movies(self, client, marvel):
        franchise = marvel["franchise"]
        first = marvel["movies"][0]

        response = client.post(f"/api/franchise/movie/{franchise.id}", json=[first.id, first.id])

        assert response.status_code == 204
        fetched = client.get(f"/api/franchise/{franchise.id}").json()
        assert fetched["movies"] == [m.id for m in marvel["movies"]]

    def test_assign_moves_movie_between_franchises(self, client, marvel, seed):
        (other,) = seed(Franchise(name="Other"))
        movie = marvel["movies"][0]

        response = client.post(f"/api/franchise/movie/{other.id}", json=[movie.id])

        assert response.status_code == 204
        assert client.get(f"/api/movie/{movie.id}").json()["franchise"] == other.id

    def test_assign_to_missing_franchise_is_404(self, client, seed):
        (movie,) = seed(Movie(title="Toy Story"))

        response = client.post("/api/franchise/movie/999", json=[movie.id])

        assert response.status_code == 404

    def test_assign_skips_ids_beyond_integer_range(self, client, seed):
        franchise, movie = seed(Franchise(name="Pixar"), Movie(title="Toy Story"))

        response = client.post(
            f"/api/franchise/movie/{franchise.id}", json=[movie.id, *OUT_OF_RANGE_IDS]
        )

        assert response.status_code == 204
        assert client.get(f"/api/franchise/{franchise.id}").json()["movies"] == [movie.id]

    def test_assign_to_franchise_id_beyond_integer_range_is_404(self, client, seed):
        (movie,) = seed(Movie(title="Toy Story"))

        response = client.post(f"/api/franchise/movie/{2**63}", json=[movie.id])

        assert response.status_code == 404

    def test_associations_of_franchise_id_beyond_integer_range_are_404(self, client):
        assert client.get(f"/api/franchise/moviesByFranchise/{2**63}").status_code == 404
        assert client.get(f"/api/franchise/charactersByFranchise/{2**63}").status_code == 404

    def test_characters_by_franchise_query_count_does_not_grow_with_movies(
        self, client, seed, statements
    ):
        small = _franchise_with_movies(seed, 1)
        large = _franchise_with_movies(seed, 4)

        statements.clear()
        assert client.get(f"/api/franchise/charactersByFranchise/{small.id}").status_code == 200
        small_count = len(statements)

        statements.clear()
        response = client.get(f"/api/franchise/charactersByFranchise/{large.id}")

        assert response.status_code == 200
        assert len(response.json()) == 4
        assert len(statements) == small_count

    def test_movies_by_franchise_query_count_does_not_grow_with_movies(
        self, client, seed, statements
    ):
        small = _franchise_with_movies(seed, 1)
        large = _franchise_with_movies(seed, 4)

        statements.clear()
        assert client.get(f"/api/franchise/moviesByFranchise/{small.id}").status_code == 200
        small_count = len(statements)

        statements.clear()
        response = client.get(f"/api/franchise/moviesByFranchise/{large.id}")

        assert response.status_code == 200
        assert all(len(movie["characters"]) == 1 for movie in response.json())
        assert len(statements) == small_count


def _franchise_with_movies(seed, movie_count):
    """Seed a franchise whose every movie has one character."""
    movies = [
        Movie(title=f"Movie {n}", characters=[Character(full_name=f"Hero {n}")])
        for n in range(movie_count)
    ]
    (franchise,) = seed(Franchise(name=f"{movie_count} movies", movies=movies))
    return franchise
