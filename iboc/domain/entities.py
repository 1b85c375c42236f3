from datetime import date, datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
Permission = Literal["admin", "editor", "viewer"]
UserType = Literal["master", "member"]

MaritalStatus = Literal["Solteiro", "Casado", "Viúvo", "Divorciado", "União Estável"]
ReceptionType = Literal["Batismo", "Aclamação", "Transferência"]
MemberStatus = Literal["Ativo", "Em Observação", "Ausente", "Transferido", "Falecido"]
MemberRole = Literal[
    "Membro", "Liderança", "Diácono", "Pastor", "Professor EBD", "Porteiro", "Músico"
]

TransactionType = Literal["Entrada", "Saída"]
PaymentMethod = Literal[
    "Dinheiro", "Pix", "Cartão Crédito", "Débito", "Boleto", "Transferência", "Cheque"
]
ClosingStatus = Literal["Aberto", "Fechado"]
AccountType = Literal["Banco", "Tesouraria"]

AssetCategory = Literal["Móveis", "Som", "Instrumentos", "Eletrônicos", "Literatura", "Outros"]
AssetCondition = Literal["Novo", "Bom", "Regular", "Ruim", "Em Manutenção"]
AssetStatus = Literal["Disponível", "Emprestado", "Em Manutenção"]

EventType = Literal["Culto", "Reunião", "Social", "EBD"]
SocialProjectStatus = Literal["Planejamento", "Realizado"]


def new_id() -> str:
    return uuid4().hex


# --- Members & Auth ---


class Member(BaseModel):
    id: str = Field(default_factory=new_id)
    full_name: str
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
    ministries: list[str] = Field(default_factory=list)
    spiritual_gifts: str | None = None

    last_attendance: str | None = None
    attendance_rate: float | None = Field(default=None, ge=0, le=100)

    username: str | None = None
    password_hash: str | None = None
    permissions: Permission | None = None


class AppUser(BaseModel):
    """The authenticated principal. Never persisted."""

    uid: str
    email: str = ""
    type: UserType
    display_name: str | None = None
    permissions: Permission = "viewer"


# --- Finance ---


class BankAccount(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    type: AccountType = "Banco"
    bank_name: str | None = None
    agency: str | None = None
    account_number: str | None = None
    pix_key: str | None = None
    pix_holder: str | None = None
    initial_balance: float = 0.0
    description: str | None = None


class Transaction(BaseModel):
    id: str = Field(default_factory=new_id)
    type: TransactionType
    category: str
    amount: float
    date: date
    description: str
    contributor_name: str | None = None
    payment_method: PaymentMethod = "Pix"
    bank_account: str = ""
    attachment_url: str | None = None
    closing_status: ClosingStatus = "Aberto"
    closing_id: str | None = None
    is_reconciled: bool = False

    @property
    def signed_amount(self) -> float:
        return self.amount if self.type == "Entrada" else -self.amount


# --- Assets (patrimony) ---


class MaintenanceRecord(BaseModel):
    id: str
    date: datetime
    description: str
    cost: float = 0.0
    provider: str = ""
    finance_transaction_id: str | None = None


class AssetLoan(BaseModel):
    member_id: str
    member_name: str
    loan_date: datetime
    expected_return_date: datetime


class Asset(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    category: AssetCategory = "Outros"
    acquisition_date: str = ""
    value: float = 0.0
    quantity: int = 1
    condition: AssetCondition = "Bom"
    status: AssetStatus = "Disponível"
    location: str = ""
    photo_url: str | None = None
    current_loan: AssetLoan | None = None
    maintenance_history: list[MaintenanceRecord] = Field(default_factory=list)

    @property
    def total_value(self) -> float:
        return (self.quantity or 1) * self.value


# --- Events ---


class RosterItem(BaseModel):
    member_id: str
    member_name: str
    role: str
    photo_url: str = ""


class ChurchEvent(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    start: datetime
    end: datetime
    type: EventType = "Culto"
    location: str = ""
    description: str = ""
    banner_url: str = ""
    roster: list[RosterItem] = Field(default_factory=list)


# --- Social / Site ---


class SocialProjectItem(BaseModel):
    image_url: str
    verse: str
    verse_reference: str
    registered_at: int | None = None


class SocialProject(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    date: date
    description: str = ""
    location: str | None = None
    banner_url: str | None = None
    status: SocialProjectStatus = "Planejamento"
    gallery: list[SocialProjectItem] = Field(default_factory=list)


class SiteContent(BaseModel):
    hero_title: str
    hero_subtitle: str
    hero_button_text: str
    hero_image_url: str | None = None
    next_event_title: str
    next_event_date: str
    next_event_time: str
    next_event_description: str
    next_event_location: str
    youtube_live_link: str

    social_project_title: str | None = None
    social_project_description: str | None = None
    social_project_items: list[SocialProjectItem] = Field(default_factory=list)
