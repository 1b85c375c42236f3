import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from iboc.adapters.clock import SystemClock
from iboc.adapters.render.mpl_renderer import (
    MatplotlibRenderer,
    category_chart_spec,
    monthly_chart_spec,
)
from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteMemberRepo, SQLiteTransactionRepo
from iboc.api.deps import (
    get_chart_renderer,
    get_clock,
    get_event_repo,
    get_member_repo,
    get_transaction_repo,
    require_permission,
)
from iboc.api.schemas import DashboardStatsResponse
from iboc.components.dashboard import DashboardStats, gather_stats
from iboc.domain.entities import AppUser

router = APIRouter()


async def _stats(
    member_repo: SQLiteMemberRepo = Depends(get_member_repo),
    transaction_repo: SQLiteTransactionRepo = Depends(get_transaction_repo),
    event_repo: SQLiteEventRepo = Depends(get_event_repo),
    clock: SystemClock = Depends(get_clock),
) -> DashboardStats:
    return await gather_stats(member_repo, transaction_repo, event_repo, clock)


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    _user: AppUser = Depends(require_permission("dashboard:view")),
    stats: DashboardStats = Depends(_stats),
) -> DashboardStatsResponse:
    return DashboardStatsResponse.model_validate(stats)


@router.get("/charts/monthly.png")
async def monthly_chart(
    _user: AppUser = Depends(require_permission("dashboard:view")),
    stats: DashboardStats = Depends(_stats),
    renderer: MatplotlibRenderer = Depends(get_chart_renderer),
) -> Response:
    """Income and expenses for the last six months."""
    png = await asyncio.to_thread(renderer.render_chart, monthly_chart_spec(stats.monthly))
    return Response(content=png, media_type="image/png")


@router.get("/charts/categories.png")
async def category_chart(
    _user: AppUser = Depends(require_permission("dashboard:view")),
    stats: DashboardStats = Depends(_stats),
    renderer: MatplotlibRenderer = Depends(get_chart_renderer),
) -> Response:
    png = await asyncio.to_thread(
        renderer.render_chart, category_chart_spec(stats.income_by_category), width=500, height=400
    )
    return Response(content=png, media_type="image/png")
