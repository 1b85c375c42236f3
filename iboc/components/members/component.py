"""
Members component - Church membership records.

Names are stored upper-cased and lists are ordered alphabetically.
Login credentials are managed by the auth component and survive edits
made here.
"""

from iboc.domain.entities import Member

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

NAME_REQUIRED = "O nome completo é obrigatório."
NOT_FOUND = "Membro não encontrado."


def sort_members(members: list[Member]) -> list[Member]:
    return sorted(members, key=lambda m: m.full_name.casefold())


def filter_members(members: list[Member], search: str | None) -> list[Member]:
    if not search:
        return members
    term = search.casefold()
    return [m for m in members if term in m.full_name.casefold()]


def validate_member(member: Member) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if not member.full_name or not member.full_name.strip():
        errors.append(ValidationError(field="full_name", code="required", message=NAME_REQUIRED))
    return errors


def run_list(inp: ListMembersInput, repo: MemberRepoPort) -> MemberListOutput:
    members = sort_members(repo.list_all())
    return MemberListOutput(members=filter_members(members, inp.search))


def run_get(inp: GetMemberInput, repo: MemberRepoPort) -> MemberOutput:
    member = repo.get_by_id(inp.member_id)
    if not member:
        return MemberOutput(
            success=False,
            errors=[ValidationError(field="id", code="not_found", message=NOT_FOUND)],
        )
    return MemberOutput(member=member, success=True)


def run_save(inp: SaveMemberInput, repo: MemberRepoPort) -> MemberOutput:
    errors = validate_member(inp.member)
    if errors:
        return MemberOutput(success=False, errors=errors)

    member = inp.member.model_copy(update={"full_name": inp.member.full_name.strip().upper()})

    if inp.member_id is not None:
        existing = repo.get_by_id(inp.member_id)
        if not existing:
            return MemberOutput(
                success=False,
                errors=[ValidationError(field="id", code="not_found", message=NOT_FOUND)],
            )
        member = member.model_copy(
            update={
                "id": existing.id,
                "username": existing.username,
                "password_hash": existing.password_hash,
                "permissions": existing.permissions,
            }
        )

    return MemberOutput(member=repo.save(member), success=True)


def run_delete(inp: DeleteMemberInput, repo: MemberRepoPort) -> MemberOutput:
    repo.delete(inp.member_id)
    return MemberOutput(success=True)


def run(
    inp: ListMembersInput | GetMemberInput | SaveMemberInput | DeleteMemberInput,
    *,
    repo: MemberRepoPort,
) -> MemberOutput | MemberListOutput:
    if isinstance(inp, ListMembersInput):
        return run_list(inp, repo)
    elif isinstance(inp, GetMemberInput):
        return run_get(inp, repo)
    elif isinstance(inp, SaveMemberInput):
        return run_save(inp, repo)
    elif isinstance(inp, DeleteMemberInput):
        return run_delete(inp, repo)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
