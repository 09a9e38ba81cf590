from typing import Any

from pydantic import BaseModel, Field

from festival.schemas.booths import BoothOut


# ---------- Event ----------
class EventCreate(BaseModel):
    event_name: Any = Field(default=None, alias="eventName")


class EventCreatedOut(BaseModel):
    admin_id: str = Field(alias="adminId")
    public_id: str = Field(alias="publicId")

    class Config:
        from_attributes = True
        populate_by_name = True


class EventPublicOut(BaseModel):
    event_name: Any = Field(alias="eventName")
    booths: list[BoothOut]

    class Config:
        populate_by_name = True


class EventAdminOut(BaseModel):
    event_name: Any = Field(alias="eventName")
    public_id: str = Field(alias="publicId")
    booths: list[BoothOut]

    class Config:
        populate_by_name = True
