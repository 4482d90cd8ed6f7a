from __future__ import annotations


class InstagramError(RuntimeError):
    """Raised when the API answers with an error status or an unreadable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_type: str | None = None,
        error_message: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.error_message = error_message
