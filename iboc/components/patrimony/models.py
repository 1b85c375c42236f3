from dataclasses import dataclass, field

from iboc.domain.entities import Asset, Transaction


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


@dataclass
class ListAssetsInput:
    search: str | None = None


@dataclass
class SaveAssetInput:
    asset: Asset
    asset_id: str | None = None  # None creates


@dataclass
class DeleteAssetInput:
    asset_id: str
    force: bool = False


@dataclass
class LendAssetInput:
    asset_id: str
    member_id: str
    days: int = 7


@dataclass
class ReturnAssetInput:
    asset_id: str


@dataclass
class RegisterMaintenanceInput:
    asset_id: str
    description: str
    cost: float = 0.0
    provider: str = ""
    launch_finance: bool = False
    finance_account: str = ""


@dataclass
class FinishMaintenanceInput:
    asset_id: str


@dataclass
class AssetOutput:
    asset: Asset | None = None
    transaction: Transaction | None = None  # expense launched by maintenance
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class AssetListOutput:
    assets: list[Asset]
    inventory_total: float = 0.0
    success: bool = True
