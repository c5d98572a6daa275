from models.movie import validate_movie
from app.core.exceptions import SeedDataError
from app.models.movie import Movie
import logging
from typing import Optional, Iterable, Iterator, List
import json

logger = logging.getLogger(__name__)

def ingest_one(raw: dict) -> Optional[Movie]:
    if not isinstance(raw, dict):
        logger.warning("Skipping seed entry, not an object: %r", raw)
        return None

    movie_id = raw.get("id")
    if not isinstance(movie_id, str) or not movie_id:
        logger.warning("Skipping seed entry without a string id: %r", movie_id)
        return None

    fields = {k: v for k, v in raw.items() if k != "id"}
    result = validate_movie(fields)
    if not result.ok:
        logger.warning("Skipping doc id=%s: %s", movie_id, result.errors_as_dicts())
        return None

    return Movie(id=movie_id, **result.data)

def ingest_many(raw_list: Iterable[dict], continue_on_error=True) -> List[Movie]:
    results = []
    skipped_count = 0

    for raw in raw_list:
        result = ingest_one(raw)

        if result is None:
            if not continue_on_error:
                raise SeedDataError("Invalid movie in seed data, see log for details")
            skipped_count += 1
        else:
            results.append(result)

    logger.info("OK=%s SKIP=%s", len(results), skipped_count)

    return results

def load_json_file(path) -> Iterator[dict]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise SeedDataError(f"Expected a JSON array at top-level of {path}")

    yield from data

def load_movies(path, continue_on_error=False) -> List[Movie]:
    movies = ingest_many(load_json_file(path), continue_on_error=continue_on_error)
    logger.info("Loaded %s movies from %s", len(movies), path)
    return movies
