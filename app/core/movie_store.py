import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from app.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieStore:
    """
    In-memory, insertion-ordered collection of movies.

    Lookups are linear scans. Missing ids are reported as None / False so the
    HTTP layer decides how to surface them.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])

    def __len__(self):
        return len(self._movies)

    def _index_of(self, movie_id: str) -> int:
        for i, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return i
        return -1

    def list_all(self) -> List[Movie]:
        return self._movies[:]

    def list_by_genre(self, name: str) -> List[Movie]:
        wanted = name.casefold()
        return [
            movie for movie in self._movies
            if any(g.casefold() == wanted for g in movie.genre)
        ]

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        i = self._index_of(movie_id)
        if i == -1:
            return None
        return self._movies[i]

    def create(self, data: Dict[str, Any]) -> Movie:
        movie = Movie(id=str(uuid.uuid4()), **data)
        self._movies.append(movie)
        logger.info("Created movie id=%s title=%r", movie.id, movie.title)
        return movie

    def patch(self, movie_id: str, partial: Dict[str, Any]) -> Optional[Movie]:
        i = self._index_of(movie_id)
        if i == -1:
            return None

        updates = {}
        for name, value in partial.items():
            if name == "id":
                continue
            updates[name] = value

        updated = self._movies[i].model_copy(update=updates)
        self._movies[i] = updated
        logger.info("Patched movie id=%s fields=%s", movie_id, sorted(updates))
        return updated

    def delete(self, movie_id: str) -> bool:
        i = self._index_of(movie_id)
        if i == -1:
            return False

        del self._movies[i]
        logger.info("Deleted movie id=%s", movie_id)
        return True
