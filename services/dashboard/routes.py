"""Dashboard and analytics routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from common.deps import get_access
from common.formatting import format_amount
from services.access.facade import DataAccess
from services.dashboard import charts, schemas
from services.denials import views as denial_views

router = APIRouter(tags=["dashboard"])

RECENT_DENIALS = 5


@router.get("/dashboard/", response_model=schemas.DashboardResponse)
def get_dashboard(access: DataAccess = Depends(get_access)):
    """Stat cards and the most recent denials for the current user."""
    owner_id = access.owner_id()
    stats, source = access.stats(owner_id)
    recent = access.denials.load(owner_id).records[:RECENT_DENIALS]

    cards = [
        schemas.StatCard(title="Total Denials", value=str(stats.total_denials)),
        schemas.StatCard(title="Active Appeals", value=str(stats.total_appeals)),
        schemas.StatCard(title="Resolved Cases", value=str(stats.resolved_denials)),
        schemas.StatCard(title="Recovery Amount", value=format_amount(stats.total_amount)),
    ]
    return schemas.DashboardResponse(
        source=source,
        stats=stats,
        cards=cards,
        recent_denials=[denial_views.to_row(denial) for denial in recent],
    )


@router.get("/dashboard/stats", response_model=schemas.DashboardStats)
def get_stats(access: DataAccess = Depends(get_access)):
    """Raw dashboard statistics."""
    stats, _ = access.stats()
    return stats


@router.get("/analytics/", response_model=schemas.AnalyticsResponse)
def get_analytics(period: str = charts.DEFAULT_PERIOD):
    """Chart datasets for the analytics page."""
    if period not in charts.PERIODS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown period {period}. Valid periods: {list(charts.PERIODS)}",
        )
    return charts.analytics_snapshot(period)
