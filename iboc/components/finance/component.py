"""
Finance component - Transactions, accounts, reconciliation and reports.

Summary rules:
- consolidated balance counts reconciled transactions only (Entrada adds,
  Saída subtracts)
- treasury inflow is cash (Dinheiro) Entrada
- bank inflow is every other Entrada payment method
"""

from datetime import date

from iboc.domain.entities import BankAccount, Transaction

from .models import (
    AccountOutput,
    DeleteAccountInput,
    DeleteTransactionInput,
    FinanceSummary,
    ListTransactionsInput,
    NewTransactionInput,
    ReconciledReportInput,
    ReconciledReportOutput,
    SaveAccountInput,
    SaveTransactionInput,
    ToggleReconciliationInput,
    TransactionListOutput,
    TransactionOutput,
    ValidationError,
)
from .ports import AccountRepoPort, TransactionRepoPort

REQUIRED_FIELDS = "Preencha os campos obrigatórios."
ACCOUNT_NAME_REQUIRED = "Nome obrigatório"
NO_ACCOUNTS = "Cadastre uma conta primeiro."
NO_RECONCILED = "Nenhum lançamento conferido encontrado neste período."
TRANSACTION_NOT_FOUND = "Lançamento não encontrado."
ACCOUNT_NOT_FOUND = "Conta não encontrada."


# --- Pure helpers ---


def sort_by_date_desc(transactions: list[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def compute_summary(transactions: list[Transaction]) -> FinanceSummary:
    consolidated = sum(t.signed_amount for t in transactions if t.is_reconciled)
    treasury = sum(
        t.amount for t in transactions if t.type == "Entrada" and t.payment_method == "Dinheiro"
    )
    bank = sum(
        t.amount for t in transactions if t.type == "Entrada" and t.payment_method != "Dinheiro"
    )
    return FinanceSummary(
        consolidated_balance=consolidated, treasury_inflow=treasury, bank_inflow=bank
    )


def default_report_range(today: date) -> tuple[date, date]:
    """First day of the current month up to today."""
    return today.replace(day=1), today


def validate_transaction(transaction: Transaction) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if not transaction.description or not transaction.description.strip():
        errors.append(
            ValidationError(field="description", code="required", message=REQUIRED_FIELDS)
        )
    if transaction.amount <= 0:
        errors.append(ValidationError(field="amount", code="positive", message=REQUIRED_FIELDS))
    return errors


# --- Transactions ---


def run_list_transactions(
    inp: ListTransactionsInput, repo: TransactionRepoPort
) -> TransactionListOutput:
    transactions = sort_by_date_desc(repo.list_all())
    if inp.on_date is not None:
        transactions = [t for t in transactions if t.date == inp.on_date]
    return TransactionListOutput(transactions=transactions)


def run_new_transaction(
    inp: NewTransactionInput, account_repo: AccountRepoPort
) -> TransactionOutput:
    """Pre-filled draft for the entry form; nothing is persisted."""
    accounts = account_repo.list_all()
    if not accounts:
        return TransactionOutput(
            success=False,
            errors=[ValidationError(field="bank_account", code="no_accounts", message=NO_ACCOUNTS)],
        )

    default_account = accounts[0]
    draft = Transaction(
        type=inp.type,
        category="Dízimo" if inp.type == "Entrada" else "Manutenção",
        amount=0,
        date=inp.today,
        description="",
        contributor_name="",
        payment_method="Dinheiro" if default_account.type == "Tesouraria" else "Pix",
        bank_account=default_account.name,
        attachment_url="",
        closing_status="Aberto",
        is_reconciled=False,
    )
    return TransactionOutput(transaction=draft, success=True)


def run_save_transaction(inp: SaveTransactionInput, repo: TransactionRepoPort) -> TransactionOutput:
    errors = validate_transaction(inp.transaction)
    if errors:
        return TransactionOutput(success=False, errors=errors)

    transaction = inp.transaction
    if inp.transaction_id is not None:
        existing = repo.get_by_id(inp.transaction_id)
        if not existing:
            return TransactionOutput(
                success=False,
                errors=[
                    ValidationError(field="id", code="not_found", message=TRANSACTION_NOT_FOUND)
                ],
            )
        # Closing data belongs to the month-end closing, not to the entry form.
        transaction = transaction.model_copy(
            update={
                "id": existing.id,
                "closing_status": existing.closing_status,
                "closing_id": existing.closing_id,
            }
        )

    return TransactionOutput(transaction=repo.save(transaction), success=True)


def run_delete_transaction(
    inp: DeleteTransactionInput, repo: TransactionRepoPort
) -> TransactionOutput:
    repo.delete(inp.transaction_id)
    return TransactionOutput(success=True)


def run_toggle_reconciliation(
    inp: ToggleReconciliationInput, repo: TransactionRepoPort
) -> TransactionOutput:
    current = repo.get_by_id(inp.transaction_id)
    if not current:
        return TransactionOutput(
            success=False,
            errors=[ValidationError(field="id", code="not_found", message=TRANSACTION_NOT_FOUND)],
        )
    updated = repo.update_fields(inp.transaction_id, {"is_reconciled": not current.is_reconciled})
    return TransactionOutput(transaction=updated, success=True)


# --- Accounts ---


def run_list_accounts(repo: AccountRepoPort) -> list[BankAccount]:
    return repo.list_all()


def run_save_account(inp: SaveAccountInput, repo: AccountRepoPort) -> AccountOutput:
    if not inp.account.name or not inp.account.name.strip():
        return AccountOutput(
            success=False,
            errors=[
                ValidationError(field="name", code="required", message=ACCOUNT_NAME_REQUIRED)
            ],
        )

    account = inp.account
    if inp.account_id is not None:
        if not repo.get_by_id(inp.account_id):
            return AccountOutput(
                success=False,
                errors=[ValidationError(field="id", code="not_found", message=ACCOUNT_NOT_FOUND)],
            )
        account = account.model_copy(update={"id": inp.account_id})

    return AccountOutput(account=repo.save(account), success=True)


def run_delete_account(inp: DeleteAccountInput, repo: AccountRepoPort) -> AccountOutput:
    repo.delete(inp.account_id)
    return AccountOutput(success=True)


# --- Reports ---


def run_reconciled_report(
    inp: ReconciledReportInput, repo: TransactionRepoPort
) -> ReconciledReportOutput:
    selected = [
        t for t in repo.list_all() if t.is_reconciled and inp.start <= t.date <= inp.end
    ]
    if not selected:
        return ReconciledReportOutput(start=inp.start, end=inp.end, error=NO_RECONCILED)

    selected.sort(key=lambda t: t.date)
    return ReconciledReportOutput(
        start=inp.start,
        end=inp.end,
        transactions=selected,
        total_income=sum(t.amount for t in selected if t.type == "Entrada"),
        total_expense=sum(t.amount for t in selected if t.type == "Saída"),
        success=True,
    )
