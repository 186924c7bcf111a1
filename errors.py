"""Failure taxonomy for request handling.

Every error carries the human-readable message that ends up in the
``error`` query parameter of the landing page redirect.
"""


class BlogError(Exception):
    """Base class for failures converted into a redirect to ``/``."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthenticated(BlogError):
    message = "User not authenticated."


class StaleSession(BlogError):
    message = "User not found."


class StoreUnavailable(BlogError):
    message = "Error fetching user."


class NotFound(BlogError):
    message = "Not found."


class AuthorizationDenied(BlogError):
    message = "Unauthorized."
