from typing import Any

from pydantic import BaseModel, Field


# Request fields stay as raw JSON values; the services check presence.
class BoothCreate(BaseModel):
    booth_name: Any = Field(default=None, alias="boothName")
    location: Any = None


class CongestionUpdate(BaseModel):
    congestion: Any = None


class BoothOut(BaseModel):
    id: str
    name: Any
    location: Any
    congestion: int
    event_id: str = Field(alias="eventId")

    class Config:
        from_attributes = True
        populate_by_name = True
