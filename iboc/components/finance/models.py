from dataclasses import dataclass, field
from datetime import date

from iboc.domain.entities import BankAccount, Transaction, TransactionType


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


# --- Transactions ---


@dataclass
class ListTransactionsInput:
    on_date: date | None = None


@dataclass
class SaveTransactionInput:
    transaction: Transaction
    transaction_id: str | None = None  # None creates


@dataclass
class DeleteTransactionInput:
    transaction_id: str


@dataclass
class ToggleReconciliationInput:
    transaction_id: str


@dataclass
class NewTransactionInput:
    type: TransactionType
    today: date


@dataclass
class TransactionOutput:
    transaction: Transaction | None = None
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class TransactionListOutput:
    transactions: list[Transaction]
    success: bool = True


# --- Accounts ---


@dataclass
class SaveAccountInput:
    account: BankAccount
    account_id: str | None = None


@dataclass
class DeleteAccountInput:
    account_id: str


@dataclass
class AccountOutput:
    account: BankAccount | None = None
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


# --- Summary / Reports ---


@dataclass(frozen=True)
class FinanceSummary:
    consolidated_balance: float
    treasury_inflow: float
    bank_inflow: float


@dataclass
class ReconciledReportInput:
    start: date
    end: date


@dataclass
class ReconciledReportOutput:
    start: date
    end: date
    transactions: list[Transaction] = field(default_factory=list)
    total_income: float = 0.0
    total_expense: float = 0.0
    success: bool = False
    error: str | None = None

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expense
