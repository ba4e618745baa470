"""Service layer for abstracting SonarQube API operations."""

from .sonar_service import SonarService
from .exceptions import (
    SonarServiceError,
    SonarRequestError,
    SonarDecodeError,
    SonarApiError,
)

__all__ = [
    "SonarService",
    "SonarServiceError",
    "SonarRequestError",
    "SonarDecodeError",
    "SonarApiError",
]
