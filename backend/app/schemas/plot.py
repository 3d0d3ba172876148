from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class GeoPointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    lat: float
    lng: float


class PlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    plot_id: str
    current_owner_email: str
    location: Optional[GeoPointResponse] = None
    area: float
    plot_type: str
    status: str
    boundaries: List[GeoPointResponse] = []
