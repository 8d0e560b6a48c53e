# -*- coding: utf-8 -*-
"""
Report location value model.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ReportLocation:
    """
    Location picked on the map for a disaster report.

    Stored as an opaque field value; the wizard never geocodes it.
    """

    address: str = ""
    lat: float = 0.0
    lng: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "address": self.address,
            "lat": self.lat,
            "lng": self.lng,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportLocation":
        """Create ReportLocation from dictionary."""
        return cls(
            address=data.get("address", "") or "",
            lat=float(data.get("lat", 0.0) or 0.0),
            lng=float(data.get("lng", 0.0) or 0.0),
        )
