"""Response models for the HTTP layer."""

from pydantic import BaseModel, ConfigDict, Field


class NeighborResponse(BaseModel):
    code: str
    distance: str


class MotifNeighborResponse(NeighborResponse):
    name: str = ""
    description: str = ""


class TraditionPointResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    latitude: float = Field(alias="Latitude")
    longitude: float = Field(alias="Longitude")


class HealthResponse(BaseModel):
    status: str
    version: str
    traditions: int
    motifs: int
