import logging
from dataclasses import replace

from festival.core.errors import EventNotFoundError, ValidationError
from festival.models.booths import Booth
from festival.models.events import Event
from festival.services.ids import ADMIN_ID_LENGTH, PUBLIC_ID_LENGTH, generate_unique_id
from festival.services.validation import is_present
from festival.stores.memory import FestivalStore

logger = logging.getLogger(__name__)


def create_event(store: FestivalStore, *, event_name) -> Event:
    """Create an event with fresh admin and public ids."""
    if not is_present(event_name):
        raise ValidationError("eventName is required")

    with store.locked():
        admin_id = generate_unique_id(ADMIN_ID_LENGTH, lambda c: c in store.events)
        public_id = generate_unique_id(PUBLIC_ID_LENGTH, store.events.public_id_taken)
        event = Event(event_name=event_name, admin_id=admin_id, public_id=public_id)
        store.events.add(event)
        result = replace(event, booths=list(event.booths))

    logger.info("Event created: %s (admin id %s)", event_name, admin_id)
    return result


def _snapshot(store: FestivalStore, event: Event) -> tuple[Event, list[Booth]]:
    booths = [replace(booth) for booth in store.booths.resolve(event.booths)]
    return replace(event, booths=list(event.booths)), booths


def get_public_event(store: FestivalStore, public_id: str) -> tuple[Event, list[Booth]]:
    """Look an event up by its public id, with its booths in registration order."""
    with store.locked():
        event = store.events.find_by_public_id(public_id)
        if event is None:
            raise EventNotFoundError()
        return _snapshot(store, event)


def get_admin_event(store: FestivalStore, admin_id: str) -> tuple[Event, list[Booth]]:
    with store.locked():
        event = store.events.get(admin_id)
        if event is None:
            raise EventNotFoundError()
        return _snapshot(store, event)
