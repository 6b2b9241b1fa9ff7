"""Directions Link DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectionsLinkDTO:
    """외부 지도 길찾기 링크."""

    url: str
    has_origin: bool
