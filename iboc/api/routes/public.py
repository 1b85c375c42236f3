from fastapi import APIRouter, Depends

from iboc.adapters.clock import SystemClock
from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteSiteContentRepo, SQLiteSocialProjectRepo
from iboc.api.deps import get_clock, get_event_repo, get_site_content_repo, get_social_project_repo
from iboc.components.events import upcoming_events
from iboc.components.site_content import run_get
from iboc.components.social import newest_items_first, sort_by_date_desc
from iboc.domain.entities import ChurchEvent, SiteContent, SocialProject

router = APIRouter()

PUBLIC_PROJECT_STATUSES = ("Realizado", "Planejamento")


def public_projects(repo: SQLiteSocialProjectRepo) -> list[SocialProject]:
    """Projects shown on the social page, newest first, galleries newest first."""
    projects = [p for p in repo.list_all() if p.status in PUBLIC_PROJECT_STATUSES]
    return [
        p.model_copy(update={"gallery": newest_items_first(p.gallery)})
        for p in sort_by_date_desc(projects)
    ]


@router.get("/site-content", response_model=SiteContent)
def public_site_content(
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
) -> SiteContent | None:
    return run_get(repo).content


@router.get("/social-projects", response_model=list[SocialProject])
def public_social_projects(
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> list[SocialProject]:
    return public_projects(repo)


@router.get("/events", response_model=list[ChurchEvent])
def public_upcoming_events(
    repo: SQLiteEventRepo = Depends(get_event_repo),
    clock: SystemClock = Depends(get_clock),
) -> list[ChurchEvent]:
    """Future events, without their volunteer rosters."""
    return [e.model_copy(update={"roster": []}) for e in upcoming_events(repo.list_all(), clock.now())]
