from dataclasses import dataclass, field

from iboc.domain.entities import Member


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


@dataclass
class ListMembersInput:
    search: str | None = None


@dataclass
class GetMemberInput:
    member_id: str


@dataclass
class SaveMemberInput:
    member: Member
    member_id: str | None = None  # None creates


@dataclass
class DeleteMemberInput:
    member_id: str


@dataclass
class MemberOutput:
    member: Member | None = None
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class MemberListOutput:
    members: list[Member]
    success: bool = True
