import logging
from dataclasses import replace

from festival.core.errors import BoothNotFoundError, EventNotFoundError, ValidationError
from festival.models.booths import Booth, Congestion
from festival.services.ids import BOOTH_ID_LENGTH, generate_unique_id
from festival.services.validation import is_present
from festival.stores.memory import FestivalStore

logger = logging.getLogger(__name__)

CONGESTION_LEVELS = frozenset(level.value for level in Congestion)


def is_valid_congestion(value) -> bool:
    """Exact match against {1, 2, 3}: floats, bools and strings never qualify."""
    return type(value) is int and value in CONGESTION_LEVELS


def register_booth(store: FestivalStore, admin_id: str, *, booth_name, location) -> Booth:
    """
    Register a booth under the event owning ``admin_id``.
    The event lookup comes first, so an unknown admin id is a 404 whatever the body.
    """
    with store.locked():
        event = store.events.get(admin_id)
        if event is None:
            raise EventNotFoundError()

        if not is_present(booth_name) or not is_present(location):
            raise ValidationError("boothName and location are required")

        booth_id = generate_unique_id(BOOTH_ID_LENGTH, lambda c: c in store.booths)
        booth = Booth(id=booth_id, name=booth_name, location=location, event_id=admin_id)
        store.booths.add(booth)
        event.booths.append(booth_id)
        event_name = event.event_name
        result = replace(booth)

    logger.info("Booth registered: %s (event %s)", booth_name, event_name)
    return result


def update_congestion(store: FestivalStore, booth_id: str, *, congestion) -> Booth:
    with store.locked():
        booth = store.booths.get(booth_id)
        if booth is None:
            raise BoothNotFoundError()

        if not is_valid_congestion(congestion):
            raise ValidationError("Invalid congestion level")

        booth.congestion = congestion
        result = replace(booth)

    logger.info("Congestion updated: %s -> %s", result.name, congestion)
    return result
