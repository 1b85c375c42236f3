from pydantic import BaseModel, Field


class ChurchRules(BaseModel):
    name: str
    short_name: str
    address: str
    youtube_channel: str = ""
    email: str = ""
    phone: str = ""


class RbacRules(BaseModel):
    roles: dict[str, list[str]]
    public_permissions: list[str] = Field(default_factory=list)


class CookieRules(BaseModel):
    secure: bool = False
    same_site: str = "lax"


class AuthRules(BaseModel):
    token_ttl_minutes: int = 60 * 24
    cookie: CookieRules = Field(default_factory=CookieRules)


class UploadsRules(BaseModel):
    max_upload_bytes: int
    allowlist_extensions: list[str]
    allowlist_mime_types: list[str]


class Rules(BaseModel):
    church: ChurchRules
    rbac: RbacRules
    auth: AuthRules = Field(default_factory=AuthRules)
    uploads: UploadsRules
