from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteMemberRepo, SQLiteSiteContentRepo
from iboc.api.deps import get_event_repo, get_member_repo, get_site_content_repo, require_permission
from iboc.api.schemas import ConnectionStatusResponse
from iboc.components.connection import ConnectionCheckError, run_check, run_seed
from iboc.domain.entities import AppUser

router = APIRouter()


@router.get("/connection", response_model=ConnectionStatusResponse)
def check_connection(
    _user: AppUser = Depends(require_permission("dashboard:view")),
    event_repo: SQLiteEventRepo = Depends(get_event_repo),
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
) -> Any:
    """Probe a public then a private collection."""
    try:
        result = run_check(event_repo, member_repo)
    except ConnectionCheckError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ConnectionStatusResponse(**vars(e.status)).model_dump(),
        )
    return ConnectionStatusResponse(**vars(result))


@router.post("/seed")
def seed_database(
    _user: AppUser = Depends(require_permission("system:seed")),
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
    site_repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
) -> dict[str, Any]:
    result = run_seed(member_repo, site_repo)
    return {"members_inserted": result.members_inserted, "site_content_written": True}
