import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.adapters.clock import SystemClock
from iboc.adapters.fs.filestore import FileSystemStore
from iboc.adapters.render.mpl_renderer import MatplotlibRenderer
from iboc.adapters.render.pdf_renderer import PdfReportRenderer
from iboc.adapters.sqlite.documents import SQLiteDocumentStore
from iboc.adapters.sqlite.repos import (
    SQLiteAccountRepo,
    SQLiteAssetRepo,
    SQLiteEventRepo,
    SQLiteMemberRepo,
    SQLiteSiteContentRepo,
    SQLiteSocialProjectRepo,
    SQLiteTransactionRepo,
)
from iboc.api.auth_utils import DEV_SECRET_KEY
from iboc.components.auth import MasterCredential, VerifySessionInput, run_verify_session
from iboc.domain.entities import AppUser
from iboc.domain.policy import PolicyEngine
from iboc.rules.loader import load_rules
from iboc.rules.models import Rules


PROJECT_ROOT = Path(__file__).resolve().parents[2]


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("IBOC_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "iboc.db")
        self.media_dir = self.data_dir / "media"
        self.rules_path = Path(os.environ.get("IBOC_RULES_PATH", str(self.base_dir / "rules.yaml")))
        self.migrations_dir = PROJECT_ROOT / "migrations"
        self.master_username = os.environ.get("IBOC_MASTER_USERNAME", "admin")
        self.master_password = os.environ.get("IBOC_MASTER_PASSWORD", "admin")
        self.secret_key = os.environ.get("IBOC_SECRET_KEY", DEV_SECRET_KEY)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(str(settings.rules_path))


@lru_cache
def _load_rules_cached(path: str) -> Rules:
    return load_rules(Path(path))


# --- Repos ---
def get_document_store(settings: Settings = Depends(get_settings)) -> SQLiteDocumentStore:
    return SQLiteDocumentStore(settings.db_path)


def get_member_repo(store: SQLiteDocumentStore = Depends(get_document_store)) -> SQLiteMemberRepo:
    return SQLiteMemberRepo(store=store)


def get_transaction_repo(
    store: SQLiteDocumentStore = Depends(get_document_store),
) -> SQLiteTransactionRepo:
    return SQLiteTransactionRepo(store=store)


def get_account_repo(store: SQLiteDocumentStore = Depends(get_document_store)) -> SQLiteAccountRepo:
    return SQLiteAccountRepo(store=store)


def get_event_repo(store: SQLiteDocumentStore = Depends(get_document_store)) -> SQLiteEventRepo:
    return SQLiteEventRepo(store=store)


def get_asset_repo(store: SQLiteDocumentStore = Depends(get_document_store)) -> SQLiteAssetRepo:
    return SQLiteAssetRepo(store=store)


def get_social_project_repo(
    store: SQLiteDocumentStore = Depends(get_document_store),
) -> SQLiteSocialProjectRepo:
    return SQLiteSocialProjectRepo(store=store)


def get_site_content_repo(
    store: SQLiteDocumentStore = Depends(get_document_store),
) -> SQLiteSiteContentRepo:
    return SQLiteSiteContentRepo(store=store)


# --- Services ---
def get_policy(rules: Rules = Depends(get_rules)) -> PolicyEngine:
    return PolicyEngine(rules)


def get_master_credential(settings: Settings = Depends(get_settings)) -> MasterCredential:
    return MasterCredential(username=settings.master_username, password=settings.master_password)


def get_file_store(settings: Settings = Depends(get_settings)) -> FileSystemStore:
    return FileSystemStore(base_path=str(settings.media_dir))


def get_chart_renderer() -> MatplotlibRenderer:
    return MatplotlibRenderer()


def get_pdf_renderer(rules: Rules = Depends(get_rules)) -> PdfReportRenderer:
    return PdfReportRenderer(church_name=rules.church.name)


# Adapters needed for component injection
def get_auth_adapter(settings: Settings = Depends(get_settings)) -> JWTAuthAdapter:
    return JWTAuthAdapter(secret_key=settings.secret_key)


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
) -> AppUser:
    # Cookie first (HttpOnly), then the Authorization header
    cookie_token = request.cookies.get("access_token")
    if cookie_token and cookie_token.startswith("Bearer "):
        token = cookie_token.split(" ", 1)[1]

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = run_verify_session(VerifySessionInput(token=token), auth_adapter)
    if not result.success or result.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.user


def require_permission(action: str) -> Callable[..., Any]:
    """Dependency that resolves the current user and checks one RBAC action."""

    async def checker(
        user: AppUser = Depends(get_current_user),
        policy: PolicyEngine = Depends(get_policy),
    ) -> AppUser:
        if not policy.check_permission(user, action):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
        return user

    return checker


def raise_for_errors(errors: list[Any]) -> None:
    """Map component validation errors onto an HTTP error."""
    if not errors:
        return
    codes = {e.code for e in errors}
    if "not_found" in codes:
        code = status.HTTP_404_NOT_FOUND
    elif codes & {"conflict", "loaned"}:
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    raise HTTPException(
        status_code=code,
        detail=[{"field": e.field, "code": e.code, "message": e.message} for e in errors],
    )
