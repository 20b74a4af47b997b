"""HTTP API integration tests."""

import pytest

from movie_finder.core.models import OMDbSearchResponse
from movie_finder.utils import UpstreamFailureError, UpstreamTimeoutError


def favorite_body(imdb_id="tt001", title="One", year=2001, poster=None):
    return {"title": title, "imdbID": imdb_id, "year": year, "poster": poster}


def assert_error(response, status_code, message=None, kind=None):
    assert response.status_code == status_code
    body = response.json()
    assert body["statusCode"] == status_code
    assert body["error"]
    if message is not None:
        assert body["message"] == message
    if kind is not None:
        assert body["kind"] == kind


@pytest.mark.integration
class TestSearchEndpoint:
    """GET /movies/search."""

    def test_search_returns_flagged_movies(
        self, client, mock_omdb_service, omdb_search_response, write_favorites
    ):
        mock_omdb_service.search.return_value = omdb_search_response
        write_favorites([favorite_body("tt0372784", "Batman Begins", 2005)])

        response = client.get("/movies/search", params={"q": "batman", "page": "1"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["count"] == 3
        assert data["totalResults"] == "583"
        assert data["movies"][0] == {
            "title": "Batman Begins",
            "imdbID": "tt0372784",
            "year": 2005,
            "poster": "https://m.media-amazon.com/images/M/begins.jpg",
            "isFavorite": True,
        }
        assert [movie["isFavorite"] for movie in data["movies"][1:]] == [False, False]
        mock_omdb_service.search.assert_awaited_once_with("batman", 1)

    def test_search_page_defaults_to_one(self, client, mock_omdb_service):
        response = client.get("/movies/search", params={"q": "  batman  "})

        assert response.status_code == 200
        mock_omdb_service.search.assert_awaited_once_with("batman", 1)

    def test_search_without_results(self, client, mock_omdb_service):
        mock_omdb_service.search.return_value = OMDbSearchResponse.empty()

        response = client.get("/movies/search", params={"q": "zzzzzz"})

        assert response.status_code == 200
        assert response.json() == {"data": {"movies": [], "count": 0, "totalResults": "0"}}

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_search_requires_query(self, client, mock_omdb_service, params):
        response = client.get("/movies/search", params=params)

        assert_error(
            response, 400, "Search query is required and cannot be empty", "validation"
        )
        mock_omdb_service.search.assert_not_awaited()

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "1.5", "²"])
    def test_search_rejects_invalid_page(self, client, mock_omdb_service, page):
        response = client.get("/movies/search", params={"q": "batman", "page": page})

        assert_error(response, 400, "Page must be a valid positive integer", "validation")
        mock_omdb_service.search.assert_not_awaited()

    def test_search_upstream_timeout(self, client, mock_omdb_service):
        message = "Request timeout - OMDb API is taking too long to respond"
        mock_omdb_service.search.side_effect = UpstreamTimeoutError(message)

        response = client.get("/movies/search", params={"q": "batman"})

        assert_error(response, 504, message, "upstream_timeout")

    def test_search_upstream_failure(self, client, mock_omdb_service):
        message = "Failed to search movies - API error"
        mock_omdb_service.search.side_effect = UpstreamFailureError(message)

        response = client.get("/movies/search", params={"q": "batman"})

        assert_error(response, 502, message, "upstream_failure")


@pytest.mark.integration
class TestFavoritesEndpoints:
    """POST and DELETE /movies/favorites."""

    def test_add_favorite(self, client, read_favorites):
        response = client.post("/movies/favorites", json=favorite_body(poster="http://img/1.jpg"))

        assert response.status_code == 201
        assert response.json() == {
            "data": {
                "message": "Movie added to favorites",
                "movie": favorite_body(poster="http://img/1.jpg"),
            }
        }
        assert read_favorites() == [favorite_body(poster="http://img/1.jpg")]

    def test_add_favorite_without_poster(self, client, read_favorites):
        body = favorite_body()
        del body["poster"]

        response = client.post("/movies/favorites", json=body)

        assert response.status_code == 201
        assert read_favorites() == [favorite_body()]

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "One", "year": 2001},
            {"imdbID": "tt001", "year": 2001},
            {"title": "One", "imdbID": "tt001"},
            favorite_body(year="2001"),
            favorite_body(year=-1),
            favorite_body(title="  "),
            favorite_body(imdb_id=""),
            favorite_body(poster=42),
            {**favorite_body(), "isFavorite": True},
        ],
    )
    def test_add_favorite_rejects_invalid_body(self, client, favorites_path, body):
        response = client.post("/movies/favorites", json=body)

        assert_error(response, 400, kind="validation")
        assert not favorites_path.exists()

    def test_add_keeps_loosely_typed_favorites(self, client, write_favorites, read_favorites):
        write_favorites([{"title": "Old", "imdbID": "tt900", "year": None, "poster": None}])

        listed = client.get("/movies/favorites/list")
        response = client.post("/movies/favorites", json=favorite_body("tt901", "New", 2001))

        assert listed.json()["data"]["totalResults"] == "1"
        assert response.status_code == 201
        assert [record["imdbID"] for record in read_favorites()] == ["tt900", "tt901"]
        assert read_favorites()[0] == favorite_body("tt900", "Old", 0)

    def test_add_duplicate_favorite(self, client, write_favorites, read_favorites):
        write_favorites([favorite_body("tt001")])

        response = client.post("/movies/favorites", json=favorite_body("TT001"))

        assert_error(response, 400, "Movie already in favorites", "conflict")
        assert read_favorites() == [favorite_body("tt001")]

    def test_remove_favorite(self, client, write_favorites, read_favorites):
        write_favorites([favorite_body("TT001")])

        response = client.delete("/movies/favorites/tt001")

        assert response.status_code == 200
        assert response.json() == {"data": {"message": "Movie removed from favorites"}}
        assert read_favorites() == []

    def test_remove_unknown_favorite(self, client, write_favorites):
        write_favorites([favorite_body("tt001")])

        response = client.delete("/movies/favorites/tt404")

        assert_error(response, 404, "Movie not found in favorites", "not_found")

    def test_remove_blank_id(self, client):
        response = client.delete("/movies/favorites/%20")

        assert_error(response, 400, "imdbID is required", "validation")

    def test_save_failure_is_server_error(self, client, favorites_path):
        # A directory in place of the file makes every write fail
        favorites_path.mkdir(parents=True)

        response = client.post("/movies/favorites", json=favorite_body())

        assert_error(response, 500, "Failed to save favorites", "persistence_failure")

    def test_added_favorite_is_flagged_in_search(
        self, client, mock_omdb_service, omdb_search_response
    ):
        mock_omdb_service.search.return_value = omdb_search_response
        client.post("/movies/favorites", json=favorite_body("tt0103359", "Batman", 1992))

        response = client.get("/movies/search", params={"q": "batman"})

        flags = {m["imdbID"]: m["isFavorite"] for m in response.json()["data"]["movies"]}
        assert flags == {"tt0372784": False, "tt0103359": True, "tt4853102": False}


@pytest.mark.integration
class TestFavoritesList:
    """GET /movies/favorites/list."""

    def test_empty_list(self, client):
        response = client.get("/movies/favorites/list")

        assert response.status_code == 200
        assert response.json() == {
            "data": {
                "favorites": [],
                "count": 0,
                "totalResults": "0",
                "currentPage": 1,
                "totalPages": 1,
            }
        }

    def test_second_page(self, client, write_favorites):
        write_favorites([favorite_body(f"tt{i:03d}", f"Movie {i}", 2000 + i) for i in range(12)])

        response = client.get("/movies/favorites/list", params={"page": "2"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [movie["imdbID"] for movie in data["favorites"]] == ["tt010", "tt011"]
        assert data["count"] == 2
        assert data["totalResults"] == "12"
        assert data["currentPage"] == 2
        assert data["totalPages"] == 2

    @pytest.mark.parametrize("page", ["-1", "0", "two", "²"])
    def test_invalid_page(self, client, page):
        response = client.get("/movies/favorites/list", params={"page": page})

        assert_error(response, 400, "Page must be a valid positive integer", "validation")

    def test_corrupt_file_lists_nothing(self, client, favorites_path):
        favorites_path.parent.mkdir(parents=True)
        favorites_path.write_text("{broken", encoding="utf-8")

        response = client.get("/movies/favorites/list")

        assert response.status_code == 200
        assert response.json()["data"]["totalResults"] == "0"


@pytest.mark.integration
class TestApplication:
    """Cross-cutting behavior."""

    def test_cors_preflight(self, client):
        response = client.options(
            "/movies/favorites",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_unknown_origin_gets_no_cors_headers(self, client):
        response = client.get(
            "/movies/favorites/list", headers={"Origin": "http://evil.example"}
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers

    def test_unknown_route(self, client):
        response = client.get("/movies/unknown")

        assert_error(response, 404, kind="not_found")

    def test_shutdown_closes_omdb_service(self, app, mock_omdb_service):
        from fastapi.testclient import TestClient

        with TestClient(app):
            pass

        mock_omdb_service.close.assert_awaited_once()
