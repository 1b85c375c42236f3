from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.adapters.sqlite.repos import SQLiteMemberRepo
from iboc.api.deps import (
    get_auth_adapter,
    get_current_user,
    get_master_credential,
    get_member_repo,
    get_rules,
)
from iboc.api.schemas import Token
from iboc.components.auth import (
    CreateSessionInput,
    LoginInput,
    MasterCredential,
    run_create_session,
    run_login,
)
from iboc.domain.entities import AppUser
from iboc.rules.models import Rules

router = APIRouter()


@router.post("/login", response_model=Token)
async def login_for_access_token(
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
    master: MasterCredential = Depends(get_master_credential),
    rules: Rules = Depends(get_rules),
) -> Token:
    """Authenticate the master credential or a member login and return an access token."""
    result = run_login(
        LoginInput(username=form_data.username, password=form_data.password),
        member_repo,
        auth_adapter,
        master,
    )
    if not result.success or result.user is None:
        if result.error_code == "backend_unavailable":
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.error)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error,
            headers={"WWW-Authenticate": "Bearer"},
        )

    ttl = rules.auth.token_ttl_minutes
    session = run_create_session(CreateSessionInput(user=result.user, ttl_minutes=ttl), auth_adapter)
    access_token = session.token_raw or ""

    # Set HttpOnly Cookie
    response.set_cookie(
        key="access_token",
        value=f"Bearer {access_token}",
        httponly=True,
        max_age=ttl * 60,
        expires=ttl * 60,
        samesite=rules.auth.cookie.same_site,  # type: ignore[arg-type]
        secure=rules.auth.cookie.secure,
    )

    return Token(access_token=access_token, token_type="bearer")


@router.post("/logout")
def logout(response: Response) -> dict[str, str]:
    """Log out by clearing the session cookie."""
    response.delete_cookie(key="access_token")
    return {"status": "success"}


@router.get("/me", response_model=AppUser)
def read_users_me(current_user: AppUser = Depends(get_current_user)) -> AppUser:
    return current_user
