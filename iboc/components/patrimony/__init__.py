"""
Patrimony component - Church assets, loans and maintenance.
"""

from .component import (
    DESCRIPTION_REQUIRED,
    MIN_QUANTITY,
    NAME_REQUIRED,
    assets_with_maintenance,
    filter_assets,
    inventory_total,
    loaned_assets,
    run_delete,
    run_finish_maintenance,
    run_lend,
    run_list,
    run_register_maintenance,
    run_return,
    run_save,
    validate_asset,
)
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

__all__ = [
    "assets_with_maintenance",
    "filter_assets",
    "inventory_total",
    "loaned_assets",
    "run_delete",
    "run_finish_maintenance",
    "run_lend",
    "run_list",
    "run_register_maintenance",
    "run_return",
    "run_save",
    "validate_asset",
    "DESCRIPTION_REQUIRED",
    "MIN_QUANTITY",
    "NAME_REQUIRED",
    "AssetListOutput",
    "AssetOutput",
    "DeleteAssetInput",
    "FinishMaintenanceInput",
    "LendAssetInput",
    "ListAssetsInput",
    "RegisterMaintenanceInput",
    "ReturnAssetInput",
    "SaveAssetInput",
    "ValidationError",
    "AssetRepoPort",
    "ClockPort",
    "ExpenseWriterPort",
    "MemberReaderPort",
]
