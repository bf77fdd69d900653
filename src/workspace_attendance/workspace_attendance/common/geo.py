from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .validators import validate_coordinates


@dataclass(frozen=True)
class GeoPoint:
    """Location captured by the client at check-in/check-out (stored verbatim)."""

    latitude: float
    longitude: float
    address: Optional[str] = None

    def validate(self) -> "GeoPoint":
        validate_coordinates(self.latitude, self.longitude)
        return self

    @classmethod
    def origin(cls) -> "GeoPoint":
        return cls(latitude=0.0, longitude=0.0)

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude, "address": self.address}
