from datetime import date, datetime

from pydantic import BaseModel, Field

from iboc.domain.entities import (
    AccountType,
    AssetCategory,
    AssetCondition,
    AssetLoan,
    AssetStatus,
    ChurchEvent,
    EventType,
    MaintenanceRecord,
    MaritalStatus,
    MemberRole,
    MemberStatus,
    PaymentMethod,
    Permission,
    ReceptionType,
    RosterItem,
    SocialProjectItem,
    SocialProjectStatus,
    TransactionType,
)


# --- Auth ---
class Token(BaseModel):
    access_token: str
    token_type: str


# --- Members ---
class MemberBase(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = ""
    photo_url: str | None = None
    father_name: str | None = None
    mother_name: str | None = None
    marital_status: MaritalStatus | None = None
    address: str = ""
    neighborhood: str | None = None
    city: str | None = None
    baptism_date: str | None = None
    reception_date: str | None = None
    reception_type: ReceptionType | None = None
    status: MemberStatus = "Ativo"
    previous_church: str | None = None
    role: MemberRole = "Membro"
    ministries: list[str] = []
    spiritual_gifts: str | None = None
    last_attendance: str | None = None
    attendance_rate: float | None = Field(default=None, ge=0, le=100)


class MemberRequest(MemberBase):
    pass


class MemberResponse(MemberBase):
    """Member as returned by the API. The password hash never leaves the server."""

    id: str
    username: str | None = None
    permissions: Permission | None = None

    class Config:
        from_attributes = True


class CredentialsRequest(BaseModel):
    username: str
    password: str
    permissions: Permission = "viewer"


# --- Finance ---
class TransactionRequest(BaseModel):
    type: TransactionType
    category: str
    amount: float = 0.0
    date: date
    description: str = ""
    contributor_name: str | None = None
    payment_method: PaymentMethod = "Pix"
    bank_account: str = ""
    attachment_url: str | None = None
    is_reconciled: bool = False


class AccountRequest(BaseModel):
    name: str
    type: AccountType = "Banco"
    bank_name: str | None = None
    agency: str | None = None
    account_number: str | None = None
    pix_key: str | None = None
    pix_holder: str | None = None
    initial_balance: float = 0.0
    description: str | None = None


class FinanceSummaryResponse(BaseModel):
    consolidated_balance: float
    treasury_inflow: float
    bank_inflow: float


# --- Events ---
class EventRequest(BaseModel):
    title: str = ""
    start: datetime | None = None
    end: datetime | None = None
    type: EventType = "Culto"
    location: str = ""
    description: str | None = None
    banner_url: str | None = None
    roster: list[RosterItem] = []


class RosterItemRequest(BaseModel):
    member_id: str
    role: str


# --- Assets ---
class AssetRequest(BaseModel):
    name: str = ""
    category: AssetCategory = "Outros"
    acquisition_date: str = ""
    value: float = 0.0
    quantity: int = 1
    condition: AssetCondition = "Bom"
    status: AssetStatus = "Disponível"
    location: str = ""
    photo_url: str | None = None


class AssetResponse(AssetRequest):
    id: str
    current_loan: AssetLoan | None = None
    maintenance_history: list[MaintenanceRecord] = []
    total_value: float = 0.0

    class Config:
        from_attributes = True


class AssetListResponse(BaseModel):
    assets: list[AssetResponse]
    inventory_total: float


class LoanRequest(BaseModel):
    member_id: str
    days: int = 7


class MaintenanceRequest(BaseModel):
    description: str = ""
    cost: float = 0.0
    provider: str = ""
    launch_finance: bool = False
    finance_account: str = ""


# --- Social / Site ---
class SocialProjectRequest(BaseModel):
    title: str = ""
    date: date
    description: str = ""
    location: str | None = None
    banner_url: str | None = None
    status: SocialProjectStatus = "Planejamento"
    gallery: list[SocialProjectItem] = []


class GalleryImagesRequest(BaseModel):
    image_urls: list[str]


# --- Dashboard ---
class MonthlyPointResponse(BaseModel):
    name: str
    income: float
    expense: float

    class Config:
        from_attributes = True


class DashboardStatsResponse(BaseModel):
    total_members: int
    active_members: int
    income: float
    expenses: float
    balance: float
    income_by_category: dict[str, float]
    monthly: list[MonthlyPointResponse]
    next_event: ChurchEvent | None = None

    class Config:
        from_attributes = True


# --- Media ---
class UploadResponse(BaseModel):
    url: str
    path: str


class BatchUploadResponse(BaseModel):
    urls: list[str]


# --- Connection ---
class ConnectionStatusResponse(BaseModel):
    public_read: bool
    private_read: bool
    message: str
