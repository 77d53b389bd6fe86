"""Stop wire models."""

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Geographic coordinate pair."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: float
    longitude: float


class ApiStop(BaseModel):
    """A stop as sent by the routing backend."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    uuid: str
    name: str
    coordinates: Coordinates
