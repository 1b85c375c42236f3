"""
Patrimony component - Church assets, loans to members and maintenance.

State transitions:
- lend: Disponível -> Emprestado (with current_loan)
- return: -> Disponível (current_loan cleared)
- register maintenance: -> Em Manutenção (status and condition)
- finish maintenance: -> Disponível, condition Bom

Maintenance may launch a Saída transaction in finance and keeps its id on
the maintenance record.
"""

import logging
from datetime import timedelta

from iboc.domain.entities import Asset, AssetLoan, MaintenanceRecord, Transaction

from .models import (
    AssetListOutput,
    AssetOutput,
    DeleteAssetInput,
    FinishMaintenanceInput,
    LendAssetInput,
    ListAssetsInput,
    RegisterMaintenanceInput,
    ReturnAssetInput,
    SaveAssetInput,
    ValidationError,
)
from .ports import AssetRepoPort, ClockPort, ExpenseWriterPort, MemberReaderPort

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Nome do bem é obrigatório."
MIN_QUANTITY = "A quantidade mínima é 1."
DESCRIPTION_REQUIRED = "Descrição obrigatória."
ASSET_NOT_FOUND = "Item não encontrado."
MEMBER_NOT_FOUND = "Membro não encontrado."
LOANED_DELETE = "Este item está emprestado. Confirme a exclusão forçada."
INVALID_DAYS = "O prazo do empréstimo deve ser de pelo menos 1 dia."


def _error(field_name: str, code: str, message: str) -> AssetOutput:
    return AssetOutput(
        success=False, errors=[ValidationError(field=field_name, code=code, message=message)]
    )


def filter_assets(assets: list[Asset], search: str | None) -> list[Asset]:
    if not search:
        return assets
    term = search.casefold()
    return [a for a in assets if term in a.name.casefold() or term in a.category.casefold()]


def inventory_total(assets: list[Asset]) -> float:
    return sum(a.total_value for a in assets)


def loaned_assets(assets: list[Asset]) -> list[Asset]:
    return [a for a in assets if a.status == "Emprestado" and a.current_loan is not None]


def assets_with_maintenance(assets: list[Asset]) -> list[Asset]:
    return [a for a in assets if a.maintenance_history]


def validate_asset(asset: Asset) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if not asset.name or not asset.name.strip():
        errors.append(ValidationError(field="name", code="required", message=NAME_REQUIRED))
    if (asset.quantity or 0) < 1:
        errors.append(ValidationError(field="quantity", code="min", message=MIN_QUANTITY))
    return errors


def run_list(inp: ListAssetsInput, repo: AssetRepoPort) -> AssetListOutput:
    assets = filter_assets(repo.list_all(), inp.search)
    return AssetListOutput(assets=assets, inventory_total=inventory_total(assets))


def run_save(inp: SaveAssetInput, repo: AssetRepoPort) -> AssetOutput:
    errors = validate_asset(inp.asset)
    if errors:
        return AssetOutput(success=False, errors=errors)

    asset = inp.asset
    if inp.asset_id is not None:
        existing = repo.get_by_id(inp.asset_id)
        if not existing:
            return _error("id", "not_found", ASSET_NOT_FOUND)
        # Loans and maintenance history only change through their own operations.
        asset = asset.model_copy(
            update={
                "id": existing.id,
                "current_loan": existing.current_loan,
                "maintenance_history": existing.maintenance_history,
            }
        )

    return AssetOutput(asset=repo.save(asset), success=True)


def run_delete(inp: DeleteAssetInput, repo: AssetRepoPort) -> AssetOutput:
    asset = repo.get_by_id(inp.asset_id)
    if asset and asset.status == "Emprestado" and not inp.force:
        return _error("status", "loaned", LOANED_DELETE)
    repo.delete(inp.asset_id)
    return AssetOutput(success=True)


def run_lend(
    inp: LendAssetInput,
    repo: AssetRepoPort,
    member_repo: MemberReaderPort,
    clock: ClockPort,
) -> AssetOutput:
    if inp.days < 1:
        return _error("days", "min", INVALID_DAYS)

    asset = repo.get_by_id(inp.asset_id)
    if not asset:
        return _error("asset_id", "not_found", ASSET_NOT_FOUND)

    member = member_repo.get_by_id(inp.member_id)
    if not member:
        return _error("member_id", "not_found", MEMBER_NOT_FOUND)

    now = clock.now_utc()
    asset.status = "Emprestado"
    asset.current_loan = AssetLoan(
        member_id=member.id,
        member_name=member.full_name,
        loan_date=now,
        expected_return_date=now + timedelta(days=inp.days),
    )
    return AssetOutput(asset=repo.save(asset), success=True)


def run_return(inp: ReturnAssetInput, repo: AssetRepoPort) -> AssetOutput:
    asset = repo.get_by_id(inp.asset_id)
    if not asset:
        return _error("asset_id", "not_found", ASSET_NOT_FOUND)

    asset.status = "Disponível"
    asset.current_loan = None
    return AssetOutput(asset=repo.save(asset), success=True)


def run_register_maintenance(
    inp: RegisterMaintenanceInput,
    repo: AssetRepoPort,
    expenses: ExpenseWriterPort,
    clock: ClockPort,
) -> AssetOutput:
    if not inp.description or not inp.description.strip():
        return _error("description", "required", DESCRIPTION_REQUIRED)

    asset = repo.get_by_id(inp.asset_id)
    if not asset:
        return _error("asset_id", "not_found", ASSET_NOT_FOUND)

    now = clock.now_utc()
    record = MaintenanceRecord(
        id=str(int(now.timestamp() * 1000)),
        date=now,
        description=inp.description.strip(),
        cost=float(inp.cost),
        provider=inp.provider,
    )

    expense: Transaction | None = None
    if inp.launch_finance and inp.cost > 0:
        expense = expenses.save(
            Transaction(
                type="Saída",
                category="Manutenção",
                amount=float(inp.cost),
                date=clock.now().date(),
                description=f"Manutenção: {asset.name} - {record.description}",
                payment_method="Transferência",
                bank_account=inp.finance_account,
                contributor_name=inp.provider,
            )
        )
        record.finance_transaction_id = expense.id
        logger.info("Maintenance expense %s launched for asset %s", expense.id, asset.id)

    asset.maintenance_history = [*asset.maintenance_history, record]
    asset.status = "Em Manutenção"
    asset.condition = "Em Manutenção"
    return AssetOutput(asset=repo.save(asset), transaction=expense, success=True)


def run_finish_maintenance(inp: FinishMaintenanceInput, repo: AssetRepoPort) -> AssetOutput:
    asset = repo.get_by_id(inp.asset_id)
    if not asset:
        return _error("asset_id", "not_found", ASSET_NOT_FOUND)

    asset.status = "Disponível"
    asset.condition = "Bom"
    return AssetOutput(asset=repo.save(asset), success=True)
