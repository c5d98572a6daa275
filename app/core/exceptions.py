class MovieError(Exception):
    message = "Movie request failed"
    status_code = 400

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class MovieNotFoundError(MovieError):
    message = "Movie not found"
    status_code = 404

class MovieValidationError(MovieError):
    message = "The movie payload is invalid"

class MalformedBodyError(MovieError):
    message = "The request body is not valid JSON"

class SeedDataError(Exception):
    pass
