"""Viewport Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from discovery.domain.value_objects.coordinate import Coordinate


@dataclass(frozen=True)
class ViewportState:
    """지도 중심과 줌 레벨."""

    center: Coordinate
    zoom: int

    def __post_init__(self) -> None:
        if not (math.isfinite(self.center.latitude) and math.isfinite(self.center.longitude)):
            raise ValueError(f"Viewport center must be finite: {self.center}")
