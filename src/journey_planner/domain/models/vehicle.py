"""Vehicle and delay wire models."""

from pydantic import BaseModel, ConfigDict


class ApiVehicle(BaseModel):
    """Vehicle operating a transit segment."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    uuid: str
    license_plate: str = ""
    type: str = ""
    line_number: int
    destination: str = ""
    capacity: int = 0
    owner: str = ""


class SegmentDelay(BaseModel):
    """Delay reported for a single segment."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    has_delay: bool = False
    delay_minutes: float = 0.0
    delay_reason: str = ""
    delay_source: str = ""
