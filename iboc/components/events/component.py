"""
Events component - Agenda and volunteer rosters.

Roster entries carry a copy of the member's name and photo so the roster
PDF and the public pages never need a member lookup.
"""

from datetime import datetime

from iboc.domain.entities import ChurchEvent, Member, RosterItem

from .models import (
    AddRosterItemInput,
    DeleteEventInput,
    EventListOutput,
    EventOutput,
    ListEventsInput,
    RemoveRosterItemInput,
    SaveEventInput,
    ValidationError,
)
from .ports import EventRepoPort, MemberReaderPort

TITLE_AND_TIMES_REQUIRED = "Preencha o título e os horários."
EVENT_NOT_FOUND = "Evento não encontrado."
MEMBER_NOT_FOUND = "Membro não encontrado."
ROLE_REQUIRED = "Informe a função."
ROSTER_INDEX_INVALID = "Item da escala inválido."


def as_local(dt: datetime) -> datetime:
    """Naive local time; aware values are converted first."""
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def sort_by_start(events: list[ChurchEvent]) -> list[ChurchEvent]:
    return sorted(events, key=lambda e: as_local(e.start))


def filter_events(events: list[ChurchEvent], search: str | None) -> list[ChurchEvent]:
    if not search:
        return events
    term = search.casefold()
    return [
        e
        for e in events
        if term in (e.title or "").casefold()
        or term in (e.type or "").casefold()
        or term in (e.location or "").casefold()
    ]


def upcoming_events(events: list[ChurchEvent], now: datetime) -> list[ChurchEvent]:
    current = as_local(now)
    return sort_by_start([e for e in events if as_local(e.start) >= current])


def next_upcoming_event(events: list[ChurchEvent], now: datetime) -> ChurchEvent | None:
    future = upcoming_events(events, now)
    return future[0] if future else None


def build_roster_item(member: Member, role: str) -> RosterItem:
    return RosterItem(
        member_id=member.id,
        member_name=member.full_name,
        role=role,
        photo_url=member.photo_url or "",
    )


def _not_found(field_name: str, message: str) -> EventOutput:
    return EventOutput(
        success=False,
        errors=[ValidationError(field=field_name, code="not_found", message=message)],
    )


def run_list(inp: ListEventsInput, repo: EventRepoPort) -> EventListOutput:
    events = sort_by_start(repo.list_all())
    return EventListOutput(events=filter_events(events, inp.search))


def run_save(inp: SaveEventInput, repo: EventRepoPort) -> EventOutput:
    if not inp.title or not inp.title.strip() or inp.start is None or inp.end is None:
        return EventOutput(
            success=False,
            errors=[
                ValidationError(field="title", code="required", message=TITLE_AND_TIMES_REQUIRED)
            ],
        )

    if inp.event_id is not None and not repo.get_by_id(inp.event_id):
        return _not_found("id", EVENT_NOT_FOUND)

    fields = dict(
        title=inp.title.strip(),
        start=inp.start,
        end=inp.end,
        type=inp.type,
        location=inp.location or "",
        description=inp.description or "",
        banner_url=inp.banner_url or "",
        roster=[r.model_copy(update={"photo_url": r.photo_url or ""}) for r in inp.roster],
    )
    event = ChurchEvent(id=inp.event_id, **fields) if inp.event_id else ChurchEvent(**fields)
    return EventOutput(event=repo.save(event), success=True)


def run_delete(inp: DeleteEventInput, repo: EventRepoPort) -> EventOutput:
    repo.delete(inp.event_id)
    return EventOutput(success=True)


def run_add_roster_item(
    inp: AddRosterItemInput, repo: EventRepoPort, member_repo: MemberReaderPort
) -> EventOutput:
    if not inp.role or not inp.role.strip():
        return EventOutput(
            success=False,
            errors=[ValidationError(field="role", code="required", message=ROLE_REQUIRED)],
        )

    event = repo.get_by_id(inp.event_id)
    if not event:
        return _not_found("event_id", EVENT_NOT_FOUND)

    member = member_repo.get_by_id(inp.member_id)
    if not member:
        return _not_found("member_id", MEMBER_NOT_FOUND)

    event.roster.append(build_roster_item(member, inp.role.strip()))
    return EventOutput(event=repo.save(event), success=True)


def run_remove_roster_item(inp: RemoveRosterItemInput, repo: EventRepoPort) -> EventOutput:
    event = repo.get_by_id(inp.event_id)
    if not event:
        return _not_found("event_id", EVENT_NOT_FOUND)

    if not 0 <= inp.index < len(event.roster):
        return EventOutput(
            success=False,
            errors=[ValidationError(field="index", code="out_of_range", message=ROSTER_INDEX_INVALID)],
        )

    event.roster = [r for i, r in enumerate(event.roster) if i != inp.index]
    return EventOutput(event=repo.save(event), success=True)
