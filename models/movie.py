import datetime
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import urlparse

MIN_YEAR = 1900
MAX_YEAR = datetime.datetime.now().year + 1
RATING_MIN = 0.0
RATING_MAX = 10.0

GENRES = (
    "Action",
    "Adventure",
    "Animation",
    "Biography",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Family",
    "Fantasy",
    "History",
    "Horror",
    "Music",
    "Musical",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Sport",
    "Thriller",
    "War",
    "Western",
)

MOVIE_FIELDS = ("title", "year", "director", "duration", "poster", "genre", "rating")

Path = List[Union[str, int]]


@dataclass
class FieldError:
    path: Path
    message: str

    def to_dict(self):
        return {"path": list(self.path), "message": self.message}


@dataclass
class ValidationResult:
    """
    Outcome of validating a candidate movie. Exactly one of `data` / `errors` is meaningful:
    `data` holds the normalized fields when `ok` is True, `errors` lists every failing field otherwise.
    """
    data: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_as_dicts(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.errors]


CheckResult = Tuple[Any, List[FieldError]]


def _fail(path: Path, message: str) -> CheckResult:
    return None, [FieldError(path=path, message=message)]


def _is_number(value) -> bool:
    # bool is an int subclass, JSON true/false must not pass as numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_int(value) -> Optional[int]:
    if not _is_number(value):
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return None
        return int(value)
    return value


def _check_text(name: str, value) -> CheckResult:
    if not isinstance(value, str):
        return _fail([name], f"{name} must be a string")
    if not value.strip():
        return _fail([name], f"{name} must not be empty")
    return value, []


def check_title(value) -> CheckResult:
    return _check_text("title", value)


def check_director(value) -> CheckResult:
    return _check_text("director", value)


def check_year(value) -> CheckResult:
    year = _as_int(value)
    if year is None:
        return _fail(["year"], "year must be an integer")
    if not MIN_YEAR <= year <= MAX_YEAR:
        return _fail(["year"], f"year must be between {MIN_YEAR} and {MAX_YEAR}")
    return year, []


def check_duration(value) -> CheckResult:
    duration = _as_int(value)
    if duration is None:
        return _fail(["duration"], "duration must be an integer")
    if duration <= 0:
        return _fail(["duration"], "duration must be a positive number of minutes")
    return duration, []


def check_poster(value) -> CheckResult:
    if not isinstance(value, str) or not value:
        return _fail(["poster"], "poster must be a non-empty string")

    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return _fail(["poster"], "poster must be a valid absolute URL")
    return value, []


def check_genre(value) -> CheckResult:
    if not isinstance(value, list):
        return _fail(["genre"], "genre must be an array of strings")
    if not value:
        return _fail(["genre"], "genre must contain at least one entry")

    errors = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            errors.append(FieldError(path=["genre", i], message="genre entries must be strings"))
        elif item not in GENRES:
            errors.append(FieldError(
                path=["genre", i],
                message=f"Invalid genre '{item}', expected one of: {', '.join(GENRES)}",
            ))

    if errors:
        return None, errors
    return value[:], []


def check_rating(value) -> CheckResult:
    if not _is_number(value) or (isinstance(value, float) and math.isnan(value)):
        return _fail(["rating"], "rating must be a number")
    if not RATING_MIN <= value <= RATING_MAX:
        return _fail(["rating"], f"rating must be between {RATING_MIN:g} and {RATING_MAX:g}")
    return value, []


FIELD_CHECKS = {
    "title": check_title,
    "year": check_year,
    "director": check_director,
    "duration": check_duration,
    "poster": check_poster,
    "genre": check_genre,
    "rating": check_rating,
}


def _validate(candidate, partial: bool) -> ValidationResult:
    if not isinstance(candidate, dict):
        return ValidationResult(errors=[FieldError(path=[], message="Expected a JSON object")])

    data = {}
    errors = []

    for key in candidate:
        if key not in FIELD_CHECKS:
            errors.append(FieldError(path=[key], message=f"Unrecognized field '{key}'"))

    for name in MOVIE_FIELDS:
        if name not in candidate:
            if not partial:
                errors.append(FieldError(path=[name], message=f"{name} is required"))
            continue

        value, field_errors = FIELD_CHECKS[name](candidate[name])
        if field_errors:
            errors.extend(field_errors)
        else:
            data[name] = value

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(data=data)


def validate_movie(candidate) -> ValidationResult:
    return _validate(candidate, partial=False)


def validate_partial_movie(candidate) -> ValidationResult:
    """
    Same per-field rules as validate_movie, but every field is optional.
    Absent fields are left out of the result so callers can overlay only what was sent.
    """
    return _validate(candidate, partial=True)
