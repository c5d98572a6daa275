import logging
import pytest
import json
import tempfile
import os
from ingestion.ingest import load_json_file, ingest_one, ingest_many, load_movies
from app.core.config import DEFAULT_DATA_PATH
from app.core.exceptions import SeedDataError

# -------------------------------
# Sample movie dicts
# -------------------------------
valid_movie = {
    "id": "1",
    "title": "Inception",
    "year": 2010,
    "director": "Christopher Nolan",
    "duration": 148,
    "poster": "https://example.com/inception.jpg",
    "genre": ["Action", "Sci-Fi"],
    "rating": 8.8
}

invalid_movie_missing_title = {
    "id": "2",
    "year": 2020,
    "director": "Director Name",
    "duration": 100,
    "poster": "https://example.com/missing.jpg",
    "genre": ["Drama"],
    "rating": 7.5
}

invalid_movie_wrong_type = "This is not a dict"

def write_temp(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w+", suffix=".json", delete=False) as f:
        f.write(content)
        return f.name

# -------------------------------
# load_json_file tests
# -------------------------------

def test_load_json_file_array():
    path = write_temp(json.dumps([valid_movie, valid_movie]))
    try:
        data = list(load_json_file(path))
        assert all(isinstance(d, dict) for d in data)
        assert len(data) == 2
    finally:
        os.remove(path)

def test_load_json_file_object_top_level():
    path = write_temp(json.dumps(valid_movie))
    try:
        with pytest.raises(SeedDataError):
            list(load_json_file(path))
    finally:
        os.remove(path)

def test_load_json_file_invalid_json():
    path = write_temp('[{"id": "1", "title": "Good"}')
    try:
        with pytest.raises(json.JSONDecodeError):
            list(load_json_file(path))
    finally:
        os.remove(path)

def test_load_movies_rejects_non_object_entry(caplog):
    path = write_temp(json.dumps([valid_movie, 3]))
    try:
        with pytest.raises(SeedDataError):
            load_movies(path)
        assert "not an object" in caplog.text
    finally:
        os.remove(path)

# -------------------------------
# ingest_one tests
# -------------------------------

def test_ingest_one_valid():
    movie = ingest_one(valid_movie)
    assert movie.id == "1"
    assert movie.genre == ["Action", "Sci-Fi"]
    assert movie.model_dump() == valid_movie

def test_ingest_one_invalid_type(caplog):
    result = ingest_one(invalid_movie_wrong_type) # type: ignore
    assert result is None
    assert "not an object" in caplog.text

def test_ingest_one_missing_required_field(caplog):
    result = ingest_one(invalid_movie_missing_title)
    assert result is None
    assert "Skipping doc id=2" in caplog.text

def test_ingest_one_missing_id(caplog):
    raw = dict(valid_movie)
    del raw["id"]
    assert ingest_one(raw) is None
    assert "without a string id" in caplog.text

# -------------------------------
# ingest_many tests
# -------------------------------

def test_ingest_many_all_valid():
    results = ingest_many([valid_movie, valid_movie])
    assert len(results) == 2

def test_ingest_many_some_invalid_continue(caplog):
    with caplog.at_level(logging.INFO):
        results = ingest_many([valid_movie, invalid_movie_missing_title, valid_movie], continue_on_error=True)
    assert len(results) == 2
    assert "Skipping doc id=2" in caplog.text
    assert "OK=2 SKIP=1" in caplog.text

def test_ingest_many_some_invalid_stop():
    with pytest.raises(SeedDataError):
        ingest_many([valid_movie, invalid_movie_missing_title, valid_movie], continue_on_error=False)

# -------------------------------
# bundled seed
# -------------------------------

def test_bundled_seed_is_valid():
    movies = load_movies(DEFAULT_DATA_PATH)
    ids = [m.id for m in movies]

    assert len(movies) > 0
    assert len(ids) == len(set(ids))

def test_load_movies_rejects_bad_seed():
    path = write_temp(json.dumps([valid_movie, invalid_movie_missing_title]))
    try:
        with pytest.raises(SeedDataError):
            load_movies(path)
    finally:
        os.remove(path)
