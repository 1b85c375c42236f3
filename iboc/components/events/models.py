from dataclasses import dataclass, field
from datetime import datetime

from iboc.domain.entities import ChurchEvent, EventType, RosterItem


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


@dataclass
class ListEventsInput:
    search: str | None = None


@dataclass
class SaveEventInput:
    title: str
    start: datetime | None
    end: datetime | None
    type: EventType = "Culto"
    location: str = ""
    description: str | None = None
    banner_url: str | None = None
    roster: list[RosterItem] = field(default_factory=list)
    event_id: str | None = None  # None creates


@dataclass
class DeleteEventInput:
    event_id: str


@dataclass
class AddRosterItemInput:
    event_id: str
    member_id: str
    role: str


@dataclass
class RemoveRosterItemInput:
    event_id: str
    index: int


@dataclass
class EventOutput:
    event: ChurchEvent | None = None
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class EventListOutput:
    events: list[ChurchEvent]
    success: bool = True
