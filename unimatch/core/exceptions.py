# unimatch/core/exceptions.py


class UniMatchError(Exception):
    """Base exception for the chat front end."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class TransportError(UniMatchError):
    """
    Any unsuccessful request/response cycle with the diagnostic service:
    unreachable host, non-success status or a body that does not parse.
    Callers do not distinguish between these.
    """
