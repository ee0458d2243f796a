"""Application error types.

Every error raised on purpose by the backend derives from
``ApplicationError`` and carries the HTTP status code it maps to.  The API
layer renders them through a single exception handler (see
``lue_lue.main``), so repositories and services raise instead of building
responses themselves.
"""
from typing import Any, Optional


class ApplicationError(Exception):
    """Base class for all errors the backend raises deliberately."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "error": type(self).__name__}


class DatabaseQueryError(ApplicationError):
    """A query failed, returned nothing, or violated a constraint.

    ``received_data`` holds the object that was being written or read when
    the query failed, if there was one.
    """

    def __init__(
        self,
        message: str,
        received_data: Any = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, status_code)
        self.received_data = received_data

    def __str__(self) -> str:
        return f"Database query error: {self.message}. Received data: {self.received_data!r}"


class BadClientRequest(ApplicationError):
    """A client sent data the backend cannot work with."""

    status_code = 400

    def __init__(self, message: str, bad_data: Any = None) -> None:
        super().__init__(message)
        self.bad_data = bad_data

    def __str__(self) -> str:
        return (
            f"Bad request was sent by a client! Error: {self.message} "
            f"... caused by: {self.bad_data!r}!"
        )


class ProcessError(ApplicationError):
    """An internal step (building a query, picking a value) could not complete."""

    status_code = 400

    def __init__(self, message: str, name_of_function: str, bad_data: Any = None) -> None:
        super().__init__(message)
        self.name_of_function = name_of_function
        self.bad_data = bad_data

    def __str__(self) -> str:
        return (
            f"Message: {self.message}, Name of the Function: {self.name_of_function}, "
            f"Possible invalid Data: {self.bad_data!r}"
        )


class InvalidMessageError(ApplicationError):
    """A chat message was rejected."""

    status_code = 422

    def __init__(self, message: str, origin_message: Any) -> None:
        super().__init__(message)
        self.origin_message = origin_message

    def __str__(self) -> str:
        return (
            f"A processed message was invalid! Error: {self.message} "
            f"& Message object that caused the error: {self.origin_message!r}"
        )


class MigrationError(ApplicationError):
    """Applying or reverting a schema revision failed."""

    def __init__(self, message: str, revision: str) -> None:
        super().__init__(message)
        self.revision = revision
