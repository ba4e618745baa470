"""Custom exceptions for service layer."""

from typing import List, Optional


class SonarServiceError(Exception):
    """Base exception for all SonarQube API errors."""

    pass


class SonarRequestError(SonarServiceError):
    """Exception raised when a request cannot be built or sent."""

    pass


class SonarDecodeError(SonarServiceError):
    """Exception raised when a response body cannot be decoded."""

    pass


class SonarApiError(SonarServiceError):
    """Exception raised when the server answers with an error envelope."""

    def __init__(
        self, message: str, messages: Optional[List[str]] = None, body: str = ""
    ):
        super().__init__(message)
        self.messages = messages or []
        self.body = body
