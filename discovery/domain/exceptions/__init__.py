"""도메인 예외."""

from discovery.domain.exceptions.base import DomainError
from discovery.domain.exceptions.business import BusinessNotFoundError
from discovery.domain.exceptions.coordinate import InvalidCoordinateError
from discovery.domain.exceptions.location import (
    LocationDeniedError,
    LocationError,
    LocationTimeoutError,
    LocationUnavailableError,
    LocationUnsupportedError,
)

__all__ = [
    "DomainError",
    "BusinessNotFoundError",
    "InvalidCoordinateError",
    "LocationError",
    "LocationDeniedError",
    "LocationTimeoutError",
    "LocationUnavailableError",
    "LocationUnsupportedError",
]
