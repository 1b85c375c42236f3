from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from iboc.adapters.clock import SystemClock
from iboc.adapters.sqlite.repos import SQLiteAssetRepo, SQLiteMemberRepo, SQLiteTransactionRepo
from iboc.api.deps import (
    get_asset_repo,
    get_clock,
    get_member_repo,
    get_policy,
    get_transaction_repo,
    raise_for_errors,
    require_permission,
)
from iboc.api.schemas import (
    AssetListResponse,
    AssetRequest,
    AssetResponse,
    LoanRequest,
    MaintenanceRequest,
)
from iboc.components.patrimony import (
    DeleteAssetInput,
    FinishMaintenanceInput,
    LendAssetInput,
    ListAssetsInput,
    RegisterMaintenanceInput,
    ReturnAssetInput,
    SaveAssetInput,
    assets_with_maintenance,
    loaned_assets,
    run_delete,
    run_finish_maintenance,
    run_lend,
    run_list,
    run_register_maintenance,
    run_return,
    run_save,
)
from iboc.domain.entities import AppUser, Asset
from iboc.domain.policy import PolicyEngine

router = APIRouter()


@router.get("", response_model=AssetListResponse)
def list_assets(
    search: str | None = None,
    _user: AppUser = Depends(require_permission("assets:view")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    """Inventory, optionally filtered by name or category, with its total value."""
    result = run_list(ListAssetsInput(search=search), repo)
    return AssetListResponse(
        assets=[AssetResponse.model_validate(a) for a in result.assets],
        inventory_total=result.inventory_total,
    )


@router.get("/loans", response_model=list[AssetResponse])
def list_loans(
    _user: AppUser = Depends(require_permission("assets:view")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    return [AssetResponse.model_validate(a) for a in loaned_assets(repo.list_all())]


@router.get("/maintenance", response_model=list[AssetResponse])
def list_maintenance_history(
    _user: AppUser = Depends(require_permission("assets:view")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    return [AssetResponse.model_validate(a) for a in assets_with_maintenance(repo.list_all())]


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
def create_asset(
    req: AssetRequest,
    _user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    result = run_save(SaveAssetInput(asset=Asset(**req.model_dump())), repo)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)


@router.put("/{asset_id}", response_model=AssetResponse)
def update_asset(
    asset_id: str,
    req: AssetRequest,
    _user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    result = run_save(SaveAssetInput(asset=Asset(**req.model_dump()), asset_id=asset_id), repo)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)


@router.delete("/{asset_id}")
def delete_asset(
    asset_id: str,
    force: bool = False,
    _user: AppUser = Depends(require_permission("assets:delete")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> dict[str, str]:
    """Delete an asset. Loaned assets need force=true."""
    result = run_delete(DeleteAssetInput(asset_id=asset_id, force=force), repo)
    raise_for_errors(result.errors)
    return {"status": "deleted"}


# --- Loans ---


@router.post("/{asset_id}/loan", response_model=AssetResponse)
def lend_asset(
    asset_id: str,
    req: LoanRequest,
    _user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
    clock: SystemClock = Depends(get_clock),
) -> Any:
    inp = LendAssetInput(asset_id=asset_id, member_id=req.member_id, days=req.days)
    result = run_lend(inp, repo, member_repo, clock)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)


@router.post("/{asset_id}/return", response_model=AssetResponse)
def return_asset(
    asset_id: str,
    _user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    result = run_return(ReturnAssetInput(asset_id=asset_id), repo)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)


# --- Maintenance ---


@router.post("/{asset_id}/maintenance", response_model=AssetResponse)
def register_maintenance(
    asset_id: str,
    req: MaintenanceRequest,
    current_user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
    transaction_repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
    policy: PolicyEngine = Depends(get_policy),
    clock: SystemClock = Depends(get_clock),
) -> Any:
    """Send an asset to maintenance, optionally launching the cost as a finance expense."""
    if req.launch_finance and not policy.check_permission(current_user, "finance:edit"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    inp = RegisterMaintenanceInput(
        asset_id=asset_id,
        description=req.description,
        cost=req.cost,
        provider=req.provider,
        launch_finance=req.launch_finance,
        finance_account=req.finance_account,
    )
    result = run_register_maintenance(inp, repo, transaction_repo, clock)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)


@router.post("/{asset_id}/maintenance/finish", response_model=AssetResponse)
def finish_maintenance(
    asset_id: str,
    _user: AppUser = Depends(require_permission("assets:edit")),
    repo: SQLiteAssetRepo = Depends(get_asset_repo),
) -> Any:
    result = run_finish_maintenance(FinishMaintenanceInput(asset_id=asset_id), repo)
    raise_for_errors(result.errors)
    return AssetResponse.model_validate(result.asset)
