from fastapi import APIRouter, Depends

from iboc.adapters.clock import SystemClock
from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteSiteContentRepo, SQLiteSocialProjectRepo
from iboc.api.deps import (
    get_clock,
    get_event_repo,
    get_site_content_repo,
    get_social_project_repo,
    raise_for_errors,
    require_permission,
)
from iboc.api.schemas import GalleryImagesRequest
from iboc.components.site_content import (
    AddSocialItemsInput,
    ImportEventInput,
    ImportProjectInput,
    RemoveSocialItemInput,
    UpdateSiteContentInput,
    run_add_social_items,
    run_get,
    run_import_event,
    run_import_project,
    run_remove_social_item,
    run_upcoming_agenda,
    run_update,
)
from iboc.domain.entities import AppUser, ChurchEvent, SiteContent

router = APIRouter()


@router.get("", response_model=SiteContent)
def get_site_content(
    _user: AppUser = Depends(require_permission("site:view")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
) -> SiteContent | None:
    return run_get(repo).content


@router.put("", response_model=SiteContent)
def update_site_content(
    req: SiteContent,
    _user: AppUser = Depends(require_permission("site:edit")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
) -> SiteContent | None:
    result = run_update(UpdateSiteContentInput(content=req), repo)
    raise_for_errors(result.errors)
    return result.content


@router.get("/agenda", response_model=list[ChurchEvent])
def upcoming_agenda(
    _user: AppUser = Depends(require_permission("site:view")),
    event_repo: SQLiteEventRepo = Depends(get_event_repo),
    clock: SystemClock = Depends(get_clock),
) -> list[ChurchEvent]:
    """Future events that can be imported into the highlight."""
    return run_upcoming_agenda(event_repo, clock).events


@router.post("/import-event/{event_id}", response_model=SiteContent)
def import_event(
    event_id: str,
    _user: AppUser = Depends(require_permission("site:edit")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
    event_repo: SQLiteEventRepo = Depends(get_event_repo),
) -> SiteContent | None:
    result = run_import_event(ImportEventInput(event_id=event_id), repo, event_repo)
    raise_for_errors(result.errors)
    return result.content


@router.post("/import-project/{project_id}", response_model=SiteContent)
def import_project(
    project_id: str,
    _user: AppUser = Depends(require_permission("site:edit")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
    project_repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> SiteContent | None:
    result = run_import_project(ImportProjectInput(project_id=project_id), repo, project_repo)
    raise_for_errors(result.errors)
    return result.content


@router.post("/social-items", response_model=SiteContent)
def add_social_items(
    req: GalleryImagesRequest,
    _user: AppUser = Depends(require_permission("site:edit")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
    clock: SystemClock = Depends(get_clock),
) -> SiteContent | None:
    result = run_add_social_items(AddSocialItemsInput(image_urls=req.image_urls), repo, clock)
    return result.content


@router.delete("/social-items/{registered_at}", response_model=SiteContent)
def remove_social_item(
    registered_at: int,
    _user: AppUser = Depends(require_permission("site:edit")),
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
) -> SiteContent | None:
    result = run_remove_social_item(RemoveSocialItemInput(registered_at=registered_at), repo)
    return result.content
