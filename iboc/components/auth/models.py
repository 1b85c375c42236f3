from dataclasses import dataclass

from iboc.domain.entities import AppUser, Member, Permission


@dataclass(frozen=True)
class MasterCredential:
    username: str
    password: str


@dataclass
class LoginInput:
    username: str
    password: str


@dataclass
class CreateSessionInput:
    user: AppUser
    ttl_minutes: int = 60 * 24


@dataclass
class VerifySessionInput:
    token: str


@dataclass
class SetCredentialsInput:
    actor: AppUser
    member_id: str
    username: str
    password: str
    permissions: Permission = "viewer"


@dataclass
class AuthOutput:
    user: AppUser | None = None
    token_raw: str | None = None
    success: bool = False
    error: str | None = None
    # "invalid_credentials" | "backend_unavailable" | "invalid_token"
    error_code: str | None = None


@dataclass
class CredentialsOutput:
    member: Member | None = None
    success: bool = False
    error: str | None = None
    error_code: str | None = None
