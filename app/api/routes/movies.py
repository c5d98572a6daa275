from typing import Any, List, Optional

from fastapi import APIRouter, Body, Request, status

from app.core.exceptions import MovieNotFoundError, MovieValidationError
from app.models.error import MessageResponse
from app.models.movie import Movie
from models.movie import validate_movie, validate_partial_movie

router = APIRouter()

def _store(request: Request):
    return request.app.state.movie_store

@router.get("", response_model=List[Movie])
def list_movies(request: Request, genre: Optional[str] = None):
    store = _store(request)
    if genre:
        return store.list_by_genre(genre)
    return store.list_all()

@router.get("/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, request: Request):
    movie = _store(request).get_by_id(movie_id)
    if movie is None:
        raise MovieNotFoundError()
    return movie

@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
def create_movie(request: Request, payload: Any = Body(default=None)):
    result = validate_movie(payload)
    if not result.ok:
        raise MovieValidationError(details=result.errors_as_dicts())

    return _store(request).create(result.data)

@router.delete("/{movie_id}", response_model=MessageResponse)
def delete_movie(movie_id: str, request: Request):
    if not _store(request).delete(movie_id):
        raise MovieNotFoundError()
    return MessageResponse(message="Movie deleted")

@router.patch("/{movie_id}", response_model=Movie)
def update_movie(movie_id: str, request: Request, payload: Any = Body(default=None)):
    result = validate_partial_movie(payload)
    if not result.ok:
        raise MovieValidationError(details=result.errors_as_dicts())

    movie = _store(request).patch(movie_id, result.data)
    if movie is None:
        raise MovieNotFoundError()
    return movie
