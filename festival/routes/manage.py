from fastapi import APIRouter, Depends

from festival.schemas.booths import BoothOut
from festival.schemas.events import EventAdminOut
from festival.services.events import get_admin_event
from festival.stores.memory import FestivalStore, get_store

router = APIRouter(prefix="/api/manage", tags=["manage"])


@router.get("/{admin_id}", response_model=EventAdminOut)
def admin_view(admin_id: str, store: FestivalStore = Depends(get_store)):
    event, booths = get_admin_event(store, admin_id)
    return EventAdminOut(event_name=event.event_name, public_id=event.public_id, booths=[BoothOut.model_validate(b) for b in booths])
