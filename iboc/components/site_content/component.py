"""
Site content component - Public home page content.

A single settings document holds the hero, the next-event highlight and the
social-project highlight. Reads never fail: missing or unreadable content
falls back to the built-in defaults.
"""

import logging

from iboc.components.events import as_local, upcoming_events
from iboc.components.social import ChoicePort, gallery_items
from iboc.domain.defaults import initial_site_content
from iboc.domain.entities import ChurchEvent, SiteContent
from iboc.ports.documents import StorageError

from .models import (
    AddSocialItemsInput,
    AgendaOutput,
    ImportEventInput,
    ImportProjectInput,
    RemoveSocialItemInput,
    SiteContentOutput,
    UpdateSiteContentInput,
    ValidationError,
)
from .ports import ClockPort, EventReaderPort, SiteContentRepoPort, SocialProjectReaderPort

logger = logging.getLogger(__name__)

HIGHLIGHT_ITEMS = 4

EVENT_NOT_FOUND = "Evento não encontrado."
PROJECT_NOT_FOUND = "Projeto não encontrado."
HERO_TITLE_REQUIRED = "O título principal é obrigatório."


def _failure(field_name: str, code: str, message: str) -> SiteContentOutput:
    return SiteContentOutput(
        success=False, errors=[ValidationError(field=field_name, code=code, message=message)]
    )


def load_content(repo: SiteContentRepoPort) -> tuple[SiteContent, bool]:
    """Stored content, or the defaults. The flag is True for the defaults."""
    try:
        content = repo.get()
    except StorageError:
        logger.exception("Failed to read site content, using defaults")
        return initial_site_content(), True
    if content is None:
        return initial_site_content(), True
    return content, False


def apply_event(content: SiteContent, event: ChurchEvent) -> SiteContent:
    start = as_local(event.start)
    return content.model_copy(
        update={
            "next_event_title": event.title,
            "next_event_date": start.strftime("%Y-%m-%d"),
            "next_event_time": start.strftime("%H:%M"),
            "next_event_location": event.location,
            "next_event_description": event.description or "",
        }
    )


def next_registered_at(content: SiteContent, now_ms: int) -> int:
    """First stamp for new gallery items, above every stamp already in use."""
    used = [i.registered_at for i in content.social_project_items if i.registered_at is not None]
    return max([now_ms, *(u + 1 for u in used)])


def run_get(repo: SiteContentRepoPort) -> SiteContentOutput:
    content, is_default = load_content(repo)
    return SiteContentOutput(content=content, is_default=is_default, success=True)


def run_update(inp: UpdateSiteContentInput, repo: SiteContentRepoPort) -> SiteContentOutput:
    if not inp.content.hero_title or not inp.content.hero_title.strip():
        return _failure("hero_title", "required", HERO_TITLE_REQUIRED)
    return SiteContentOutput(content=repo.save(inp.content), success=True)


def run_import_event(
    inp: ImportEventInput, repo: SiteContentRepoPort, event_repo: EventReaderPort
) -> SiteContentOutput:
    event = event_repo.get_by_id(inp.event_id)
    if not event:
        return _failure("event_id", "not_found", EVENT_NOT_FOUND)

    content, _ = load_content(repo)
    return SiteContentOutput(content=repo.save(apply_event(content, event)), success=True)


def run_import_project(
    inp: ImportProjectInput, repo: SiteContentRepoPort, project_repo: SocialProjectReaderPort
) -> SiteContentOutput:
    project = project_repo.get_by_id(inp.project_id)
    if not project:
        return _failure("project_id", "not_found", PROJECT_NOT_FOUND)

    content, _ = load_content(repo)
    updated = content.model_copy(
        update={
            "social_project_title": project.title,
            "social_project_description": project.description,
            "social_project_items": project.gallery[:HIGHLIGHT_ITEMS],
        }
    )
    return SiteContentOutput(content=repo.save(updated), success=True)


def run_add_social_items(
    inp: AddSocialItemsInput,
    repo: SiteContentRepoPort,
    clock: ClockPort,
    rng: ChoicePort | None = None,
) -> SiteContentOutput:
    content, _ = load_content(repo)
    now_ms = int(clock.now_utc().timestamp() * 1000)
    items = gallery_items(inp.image_urls, rng, next_registered_at(content, now_ms))
    updated = content.model_copy(
        update={"social_project_items": [*content.social_project_items, *items]}
    )
    return SiteContentOutput(content=repo.save(updated), success=True)


def run_remove_social_item(
    inp: RemoveSocialItemInput, repo: SiteContentRepoPort
) -> SiteContentOutput:
    content, _ = load_content(repo)
    updated = content.model_copy(
        update={
            "social_project_items": [
                i for i in content.social_project_items if i.registered_at != inp.registered_at
            ]
        }
    )
    return SiteContentOutput(content=repo.save(updated), success=True)


def run_upcoming_agenda(event_repo: EventReaderPort, clock: ClockPort) -> AgendaOutput:
    return AgendaOutput(events=upcoming_events(event_repo.list_all(), clock.now()))
