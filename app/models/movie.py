from pydantic import BaseModel
from typing import List, Union

class Movie(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: List[str]
    rating: Union[int, float]
