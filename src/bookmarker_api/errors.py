"""
Domain errors for the bookmarker service.

Services and repositories raise these instead of framework exceptions or raw
storage errors. The HTTP layer maps ``status_code`` onto the response and
renders ``message`` inside the error envelope.
"""


class BookmarkerError(Exception):
    """Base error; unknown subclasses surface as 500."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BadRequestError(BookmarkerError):
    """Malformed or missing input the client can correct."""

    status_code = 400


class UnauthorizedError(BookmarkerError):
    """Missing, invalid or mismatched identity."""

    status_code = 401

    def __init__(self, message: str = "Please sign up or log in") -> None:
        super().__init__(message)


class NotFoundError(BookmarkerError):
    """A referenced user, saved book, review or rating does not exist."""

    status_code = 404


class ConflictError(BookmarkerError):
    """The write would break a one-per-(user, volume) rule."""

    status_code = 409


class CatalogUnavailableError(BookmarkerError):
    """An upstream book catalog failed or answered with an error."""

    status_code = 502
