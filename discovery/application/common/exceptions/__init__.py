"""Application Exceptions."""

from discovery.application.common.exceptions.base import ApplicationError
from discovery.application.common.exceptions.validation import (
    BusinessDirectoryUnavailableError,
    DirectionsUnavailableError,
    SearchDispatchFailedError,
    SessionNotFoundError,
)

__all__ = [
    "ApplicationError",
    "BusinessDirectoryUnavailableError",
    "DirectionsUnavailableError",
    "SearchDispatchFailedError",
    "SessionNotFoundError",
]
