from dataclasses import dataclass, field
from typing import List, Optional
import enum

from app.core.types import GeoPoint


class PlotType(str, enum.Enum):
    AGRICULTURAL = "agricultural"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


@dataclass
class Plot:
    """Land plot held by the plot registry. Geo/area attributes are opaque to the workflow engine."""
    plot_id: str
    current_owner_email: str
    location: Optional[GeoPoint] = None
    area: float = 0.0
    plot_type: str = PlotType.AGRICULTURAL.value
    status: str = "active"
    boundaries: List[GeoPoint] = field(default_factory=list)
    is_seed: bool = False

    def is_owned_by(self, email: str) -> bool:
        return self.current_owner_email == email

    def __repr__(self):
        return f"<Plot {self.plot_id}>"
