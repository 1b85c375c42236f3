from dataclasses import dataclass, field

from iboc.domain.entities import ChurchEvent


@dataclass
class MonthlyPoint:
    name: str  # Portuguese month abbreviation
    income: float = 0.0
    expense: float = 0.0


@dataclass
class DashboardStats:
    total_members: int = 0
    active_members: int = 0
    income: float = 0.0
    expenses: float = 0.0
    balance: float = 0.0
    income_by_category: dict[str, float] = field(default_factory=dict)
    monthly: list[MonthlyPoint] = field(default_factory=list)
    next_event: ChurchEvent | None = None
