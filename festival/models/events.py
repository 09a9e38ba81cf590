from dataclasses import dataclass, field


@dataclass
class Event:
    event_name: str
    admin_id: str
    public_id: str
    booths: list[str] = field(default_factory=list)  # booth ids, registration order
