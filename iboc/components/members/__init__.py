"""
Members component - Church membership records.
"""

from .component import (
    NAME_REQUIRED,
    filter_members,
    run,
    run_delete,
    run_get,
    run_list,
    run_save,
    sort_members,
    validate_member,
)
from .models import (
    DeleteMemberInput,
    GetMemberInput,
    ListMembersInput,
    MemberListOutput,
    MemberOutput,
    SaveMemberInput,
    ValidationError,
)
from .ports import MemberRepoPort

__all__ = [
    "run",
    "run_delete",
    "run_get",
    "run_list",
    "run_save",
    "filter_members",
    "sort_members",
    "validate_member",
    "NAME_REQUIRED",
    "DeleteMemberInput",
    "GetMemberInput",
    "ListMembersInput",
    "MemberListOutput",
    "MemberOutput",
    "SaveMemberInput",
    "ValidationError",
    "MemberRepoPort",
]
