from fastapi import APIRouter, Depends

from festival.routes.body import json_object
from festival.schemas.booths import BoothCreate, BoothOut
from festival.schemas.events import EventCreate, EventCreatedOut, EventPublicOut
from festival.services.booths import register_booth
from festival.services.events import create_event, get_public_event
from festival.stores.memory import FestivalStore, get_store

router = APIRouter(prefix="/api/events", tags=["events"])


@router.post("", response_model=EventCreatedOut, status_code=201)
def create(body: dict = Depends(json_object), store: FestivalStore = Depends(get_store)):
    payload = EventCreate.model_validate(body)
    return create_event(store, event_name=payload.event_name)


@router.post("/{admin_id}/booths", response_model=BoothOut, status_code=201)
def add_booth(admin_id: str, body: dict = Depends(json_object), store: FestivalStore = Depends(get_store)):
    payload = BoothCreate.model_validate(body)
    return register_booth(store, admin_id, booth_name=payload.booth_name, location=payload.location)


@router.get("/{public_id}", response_model=EventPublicOut)
def public_view(public_id: str, store: FestivalStore = Depends(get_store)):
    """Read-only view for visitors."""
    event, booths = get_public_event(store, public_id)
    return EventPublicOut(event_name=event.event_name, booths=[BoothOut.model_validate(b) for b in booths])
