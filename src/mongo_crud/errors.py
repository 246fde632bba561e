"""Exceptions raised by the user API."""


class UserValidationError(ValueError):
    """A user record failed the pre-persistence checks."""


class UserApiError(Exception):
    """Client-visible failure carrying the HTTP status and message to return.

    Rendered as ``{"success": false, "message": ...}`` unless ``plain_text``
    is set, in which case the message is sent as a ``text/plain`` body.
    """

    def __init__(self, status_code: int, message: str, plain_text: bool = False) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.plain_text = plain_text

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {"success": False, "message": self.message}
