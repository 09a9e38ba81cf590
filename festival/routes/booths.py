from fastapi import APIRouter, Depends

from festival.routes.body import json_object
from festival.schemas.booths import BoothOut, CongestionUpdate
from festival.services.booths import update_congestion
from festival.stores.memory import FestivalStore, get_store

router = APIRouter(prefix="/api/booths", tags=["booths"])


@router.put("/{booth_id}", response_model=BoothOut)
def set_congestion(booth_id: str, body: dict = Depends(json_object), store: FestivalStore = Depends(get_store)):
    payload = CongestionUpdate.model_validate(body)
    return update_congestion(store, booth_id, congestion=payload.congestion)
