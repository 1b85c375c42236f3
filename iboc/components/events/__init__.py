"""
Events component - Agenda and volunteer rosters.
"""

from .component import (
    TITLE_AND_TIMES_REQUIRED,
    as_local,
    build_roster_item,
    filter_events,
    next_upcoming_event,
    run_add_roster_item,
    run_delete,
    run_list,
    run_remove_roster_item,
    run_save,
    sort_by_start,
    upcoming_events,
)
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

__all__ = [
    "as_local",
    "build_roster_item",
    "filter_events",
    "next_upcoming_event",
    "run_add_roster_item",
    "run_delete",
    "run_list",
    "run_remove_roster_item",
    "run_save",
    "sort_by_start",
    "upcoming_events",
    "TITLE_AND_TIMES_REQUIRED",
    "AddRosterItemInput",
    "DeleteEventInput",
    "EventListOutput",
    "EventOutput",
    "ListEventsInput",
    "RemoveRosterItemInput",
    "SaveEventInput",
    "ValidationError",
    "EventRepoPort",
    "MemberReaderPort",
]
