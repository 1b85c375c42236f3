import asyncio
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from iboc.adapters.clock import SystemClock
from iboc.adapters.render.pdf_renderer import PdfReportRenderer, report_filename
from iboc.adapters.sqlite.repos import SQLiteAccountRepo, SQLiteTransactionRepo
from iboc.api.deps import (
    get_account_repo,
    get_clock,
    get_pdf_renderer,
    get_transaction_repo,
    raise_for_errors,
    require_permission,
)
from iboc.api.schemas import AccountRequest, FinanceSummaryResponse, TransactionRequest
from iboc.components.finance import (
    DeleteAccountInput,
    DeleteTransactionInput,
    ListTransactionsInput,
    NewTransactionInput,
    ReconciledReportInput,
    SaveAccountInput,
    SaveTransactionInput,
    ToggleReconciliationInput,
    compute_summary,
    default_report_range,
    run_delete_account,
    run_delete_transaction,
    run_list_accounts,
    run_list_transactions,
    run_new_transaction,
    run_reconciled_report,
    run_save_account,
    run_save_transaction,
    run_toggle_reconciliation,
    sort_by_date_desc,
)
from iboc.domain.entities import AppUser, BankAccount, Transaction, TransactionType

router = APIRouter()


# --- Overview ---


@router.get("/overview")
async def finance_overview(
    _user: AppUser = Depends(require_permission("finance:view")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
    account_repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> dict[str, Any]:
    """Transactions, accounts and the summary cards, read concurrently."""
    transactions, accounts = await asyncio.gather(
        asyncio.to_thread(repo.list_all),
        asyncio.to_thread(account_repo.list_all),
    )
    return {
        "transactions": sort_by_date_desc(transactions),
        "accounts": accounts,
        "summary": FinanceSummaryResponse(**vars(compute_summary(transactions))),
    }


@router.get("/summary", response_model=FinanceSummaryResponse)
def finance_summary(
    _user: AppUser = Depends(require_permission("finance:view")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> FinanceSummaryResponse:
    return FinanceSummaryResponse(**vars(compute_summary(repo.list_all())))


# --- Transactions ---


@router.get("/transactions", response_model=list[Transaction])
def list_transactions(
    on_date: date | None = None,
    _user: AppUser = Depends(require_permission("finance:view")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> list[Transaction]:
    return run_list_transactions(ListTransactionsInput(on_date=on_date), repo).transactions


@router.get("/transactions/new", response_model=Transaction)
def new_transaction(
    type: TransactionType = "Entrada",
    _user: AppUser = Depends(require_permission("finance:edit")),
    account_repo: SQLiteAccountRepo = Depends(get_account_repo),
    clock: SystemClock = Depends(get_clock),
) -> Transaction | None:
    """Pre-filled draft for a new entry. Needs at least one account."""
    result = run_new_transaction(NewTransactionInput(type=type, today=clock.now().date()), account_repo)
    raise_for_errors(result.errors)
    return result.transaction


@router.post("/transactions", response_model=Transaction, status_code=status.HTTP_201_CREATED)
def create_transaction(
    req: TransactionRequest,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> Transaction | None:
    result = run_save_transaction(SaveTransactionInput(transaction=Transaction(**req.model_dump())), repo)
    raise_for_errors(result.errors)
    return result.transaction


@router.put("/transactions/{transaction_id}", response_model=Transaction)
def update_transaction(
    transaction_id: str,
    req: TransactionRequest,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> Transaction | None:
    inp = SaveTransactionInput(
        transaction=Transaction(**req.model_dump()), transaction_id=transaction_id
    )
    result = run_save_transaction(inp, repo)
    raise_for_errors(result.errors)
    return result.transaction


@router.delete("/transactions/{transaction_id}")
def delete_transaction(
    transaction_id: str,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> dict[str, str]:
    run_delete_transaction(DeleteTransactionInput(transaction_id=transaction_id), repo)
    return {"status": "deleted"}


@router.post("/transactions/{transaction_id}/reconcile", response_model=Transaction)
def toggle_reconciliation(
    transaction_id: str,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
) -> Transaction | None:
    result = run_toggle_reconciliation(ToggleReconciliationInput(transaction_id=transaction_id), repo)
    raise_for_errors(result.errors)
    return result.transaction


# --- Accounts ---


@router.get("/accounts", response_model=list[BankAccount])
def list_accounts(
    _user: AppUser = Depends(require_permission("finance:view")),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> list[BankAccount]:
    return run_list_accounts(repo)


@router.post("/accounts", response_model=BankAccount, status_code=status.HTTP_201_CREATED)
def create_account(
    req: AccountRequest,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> BankAccount | None:
    result = run_save_account(SaveAccountInput(account=BankAccount(**req.model_dump())), repo)
    raise_for_errors(result.errors)
    return result.account


@router.put("/accounts/{account_id}", response_model=BankAccount)
def update_account(
    account_id: str,
    req: AccountRequest,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> BankAccount | None:
    inp = SaveAccountInput(account=BankAccount(**req.model_dump()), account_id=account_id)
    result = run_save_account(inp, repo)
    raise_for_errors(result.errors)
    return result.account


@router.delete("/accounts/{account_id}")
def delete_account(
    account_id: str,
    _user: AppUser = Depends(require_permission("finance:edit")),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> dict[str, str]:
    run_delete_account(DeleteAccountInput(account_id=account_id), repo)
    return {"status": "deleted"}


# --- Reports ---


@router.get("/reports/reconciled")
def reconciled_report_pdf(
    start: date | None = None,
    end: date | None = None,
    _user: AppUser = Depends(require_permission("finance:view")),
    repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
    renderer: PdfReportRenderer = Depends(get_pdf_renderer),
    clock: SystemClock = Depends(get_clock),
) -> Response:
    """PDF of the reconciled transactions in [start, end]. Defaults to the current month."""
    default_start, default_end = default_report_range(clock.now().date())
    inp = ReconciledReportInput(start=start or default_start, end=end or default_end)
    result = run_reconciled_report(inp, repo)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)

    pdf = renderer.render_reconciled_report(
        result.transactions, result.start, result.end, clock.now()
    )
    filename = report_filename(result.start, result.end)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
