from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.adapters.sqlite.repos import SQLiteMemberRepo
from iboc.api.deps import (
    get_auth_adapter,
    get_member_repo,
    get_policy,
    raise_for_errors,
    require_permission,
)
from iboc.api.schemas import CredentialsRequest, MemberRequest, MemberResponse
from iboc.components.auth import SetCredentialsInput, run_set_credentials
from iboc.components.members import (
    DeleteMemberInput,
    GetMemberInput,
    ListMembersInput,
    SaveMemberInput,
    run_delete,
    run_get,
    run_list,
    run_save,
)
from iboc.domain.entities import AppUser, Member
from iboc.domain.policy import PolicyEngine

router = APIRouter()

_CREDENTIAL_ERRORS = {
    "forbidden": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
}


@router.get("", response_model=list[MemberResponse])
def list_members(
    search: str | None = None,
    _user: AppUser = Depends(require_permission("members:view")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> list[Any]:
    """Members in alphabetical order, optionally filtered by name."""
    return run_list(ListMembersInput(search=search), repo).members


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: str,
    _user: AppUser = Depends(require_permission("members:view")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> Any:
    result = run_get(GetMemberInput(member_id=member_id), repo)
    raise_for_errors(result.errors)
    return result.member


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    req: MemberRequest,
    _user: AppUser = Depends(require_permission("members:edit")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> Any:
    result = run_save(SaveMemberInput(member=Member(**req.model_dump())), repo)
    raise_for_errors(result.errors)
    return result.member


@router.put("/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: str,
    req: MemberRequest,
    _user: AppUser = Depends(require_permission("members:edit")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> Any:
    result = run_save(SaveMemberInput(member=Member(**req.model_dump()), member_id=member_id), repo)
    raise_for_errors(result.errors)
    return result.member


@router.delete("/{member_id}")
def delete_member(
    member_id: str,
    _user: AppUser = Depends(require_permission("members:delete")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> dict[str, str]:
    run_delete(DeleteMemberInput(member_id=member_id), repo)
    return {"status": "deleted"}


@router.put("/{member_id}/credentials", response_model=MemberResponse)
def set_member_credentials(
    member_id: str,
    req: CredentialsRequest,
    current_user: AppUser = Depends(require_permission("members:view")),
    repo: SQLiteMemberRepo = Depends(get_member_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
    policy: PolicyEngine = Depends(get_policy),
) -> Any:
    """Set the login of a member (admin only)."""
    inp = SetCredentialsInput(
        actor=current_user,
        member_id=member_id,
        username=req.username,
        password=req.password,
        permissions=req.permissions,
    )
    result = run_set_credentials(inp, repo, auth_adapter, policy)
    if not result.success:
        code = _CREDENTIAL_ERRORS.get(result.error_code or "", status.HTTP_400_BAD_REQUEST)
        raise HTTPException(status_code=code, detail=result.error)
    return result.member
