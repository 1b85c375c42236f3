from fastapi import APIRouter, Depends, HTTPException, Response, status

from iboc.adapters.clock import SystemClock
from iboc.adapters.render.pdf_renderer import PdfReportRenderer, roster_filename
from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteMemberRepo
from iboc.api.deps import (
    get_clock,
    get_event_repo,
    get_member_repo,
    get_pdf_renderer,
    raise_for_errors,
    require_permission,
)
from iboc.api.schemas import EventRequest, RosterItemRequest
from iboc.components.events import (
    AddRosterItemInput,
    DeleteEventInput,
    ListEventsInput,
    RemoveRosterItemInput,
    SaveEventInput,
    as_local,
    next_upcoming_event,
    run_add_roster_item,
    run_delete,
    run_list,
    run_remove_roster_item,
    run_save,
)
from iboc.domain.entities import AppUser, ChurchEvent

router = APIRouter()


def _save_input(req: EventRequest, event_id: str | None = None) -> SaveEventInput:
    return SaveEventInput(
        title=req.title,
        start=as_local(req.start) if req.start else None,
        end=as_local(req.end) if req.end else None,
        type=req.type,
        location=req.location,
        description=req.description,
        banner_url=req.banner_url,
        roster=req.roster,
        event_id=event_id,
    )


@router.get("", response_model=list[ChurchEvent])
def list_events(
    search: str | None = None,
    _user: AppUser = Depends(require_permission("events:view")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> list[ChurchEvent]:
    """Events ordered by start, optionally filtered by title, type or location."""
    return run_list(ListEventsInput(search=search), repo).events


@router.get("/next", response_model=ChurchEvent | None)
def next_event(
    _user: AppUser = Depends(require_permission("events:view")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
    clock: SystemClock = Depends(get_clock),
) -> ChurchEvent | None:
    return next_upcoming_event(repo.list_all(), clock.now())


@router.get("/{event_id}", response_model=ChurchEvent)
def get_event(
    event_id: str,
    _user: AppUser = Depends(require_permission("events:view")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> ChurchEvent:
    event = repo.get_by_id(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Evento não encontrado.")
    return event


@router.post("", response_model=ChurchEvent, status_code=status.HTTP_201_CREATED)
def create_event(
    req: EventRequest,
    _user: AppUser = Depends(require_permission("events:edit")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> ChurchEvent | None:
    result = run_save(_save_input(req), repo)
    raise_for_errors(result.errors)
    return result.event


@router.put("/{event_id}", response_model=ChurchEvent)
def update_event(
    event_id: str,
    req: EventRequest,
    _user: AppUser = Depends(require_permission("events:edit")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> ChurchEvent | None:
    result = run_save(_save_input(req, event_id), repo)
    raise_for_errors(result.errors)
    return result.event


@router.delete("/{event_id}")
def delete_event(
    event_id: str,
    _user: AppUser = Depends(require_permission("events:delete")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> dict[str, str]:
    run_delete(DeleteEventInput(event_id=event_id), repo)
    return {"status": "deleted"}


# --- Roster ---


@router.post("/{event_id}/roster", response_model=ChurchEvent)
def add_roster_item(
    event_id: str,
    req: RosterItemRequest,
    _user: AppUser = Depends(require_permission("events:edit")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> ChurchEvent | None:
    inp = AddRosterItemInput(event_id=event_id, member_id=req.member_id, role=req.role)
    result = run_add_roster_item(inp, repo, member_repo)
    raise_for_errors(result.errors)
    return result.event


@router.delete("/{event_id}/roster/{index}", response_model=ChurchEvent)
def remove_roster_item(
    event_id: str,
    index: int,
    _user: AppUser = Depends(require_permission("events:edit")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
) -> ChurchEvent | None:
    result = run_remove_roster_item(RemoveRosterItemInput(event_id=event_id, index=index), repo)
    raise_for_errors(result.errors)
    return result.event


@router.get("/{event_id}/roster.pdf")
def roster_pdf(
    event_id: str,
    _user: AppUser = Depends(require_permission("events:view")),
    repo: SQLiteEventRepo = Depends(get_event_repo),
    renderer: PdfReportRenderer = Depends(get_pdf_renderer),
    clock: SystemClock = Depends(get_clock),
) -> Response:
    event = repo.get_by_id(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Evento não encontrado.")

    pdf = renderer.render_roster(event, clock.now())
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{roster_filename(event)}"'},
    )
