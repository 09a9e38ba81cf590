import enum
from dataclasses import dataclass


class Congestion(int, enum.Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


@dataclass
class Booth:
    id: str
    name: str
    location: str
    event_id: str  # admin id of the owning event
    congestion: int = Congestion.LOW.value
