"""
Finance component - Transactions, accounts, reconciliation and reports.
"""

from .component import (
    NO_ACCOUNTS,
    NO_RECONCILED,
    REQUIRED_FIELDS,
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
    validate_transaction,
)
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

__all__ = [
    "compute_summary",
    "default_report_range",
    "run_delete_account",
    "run_delete_transaction",
    "run_list_accounts",
    "run_list_transactions",
    "run_new_transaction",
    "run_reconciled_report",
    "run_save_account",
    "run_save_transaction",
    "run_toggle_reconciliation",
    "sort_by_date_desc",
    "validate_transaction",
    "NO_ACCOUNTS",
    "NO_RECONCILED",
    "REQUIRED_FIELDS",
    "AccountOutput",
    "DeleteAccountInput",
    "DeleteTransactionInput",
    "FinanceSummary",
    "ListTransactionsInput",
    "NewTransactionInput",
    "ReconciledReportInput",
    "ReconciledReportOutput",
    "SaveAccountInput",
    "SaveTransactionInput",
    "ToggleReconciliationInput",
    "TransactionListOutput",
    "TransactionOutput",
    "ValidationError",
    "AccountRepoPort",
    "TransactionRepoPort",
]
