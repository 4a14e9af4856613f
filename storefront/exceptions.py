"""
HTTP error taxonomy raised by the services.

Each class is an ``HTTPException``; the app renders it as
``{"message": ...}`` with the matching status code.
"""
from fastapi import HTTPException, status


class ValidationFailure(HTTPException):
    """Malformed or missing input"""

    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthenticationRequired(HTTPException):
    """Caller identity missing or unparseable"""

    def __init__(self, detail: str = "User ID is required."):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class Unauthorized(HTTPException):
    """Credentials did not match"""

    def __init__(self, detail: str = "Invalid credentials."):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
