"""
Site content component - Public home page content.
"""

from .component import (
    HIGHLIGHT_ITEMS,
    apply_event,
    load_content,
    next_registered_at,
    run_add_social_items,
    run_get,
    run_import_event,
    run_import_project,
    run_remove_social_item,
    run_upcoming_agenda,
    run_update,
)
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

__all__ = [
    "apply_event",
    "load_content",
    "next_registered_at",
    "run_add_social_items",
    "run_get",
    "run_import_event",
    "run_import_project",
    "run_remove_social_item",
    "run_upcoming_agenda",
    "run_update",
    "HIGHLIGHT_ITEMS",
    "AddSocialItemsInput",
    "AgendaOutput",
    "ImportEventInput",
    "ImportProjectInput",
    "RemoveSocialItemInput",
    "SiteContentOutput",
    "UpdateSiteContentInput",
    "ValidationError",
    "ClockPort",
    "EventReaderPort",
    "SiteContentRepoPort",
    "SocialProjectReaderPort",
]
