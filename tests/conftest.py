import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.movie_store import MovieStore
from app.main import create_app
from app.models.movie import Movie

MATRIX = {
    "id": "a1",
    "title": "The Matrix",
    "year": 1999,
    "director": "Lana Wachowski",
    "duration": 136,
    "poster": "https://example.com/matrix.jpg",
    "genre": ["Action", "Sci-Fi"],
    "rating": 8.7,
}

SHAWSHANK = {
    "id": "b2",
    "title": "The Shawshank Redemption",
    "year": 1994,
    "director": "Frank Darabont",
    "duration": 142,
    "poster": "https://example.com/shawshank.jpg",
    "genre": ["Drama"],
    "rating": 9.3,
}


@pytest.fixture
def new_movie():
    return {
        "title": "Arrival",
        "year": 2016,
        "director": "Denis Villeneuve",
        "duration": 116,
        "poster": "https://example.com/arrival.jpg",
        "genre": ["Drama", "Sci-Fi"],
        "rating": 7.9,
    }


@pytest.fixture
def store():
    return MovieStore([Movie(**MATRIX), Movie(**SHAWSHANK)])


@pytest.fixture
def settings():
    return Settings(allowed_origins=("http://localhost:8080", "http://movies.com"))


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
