"""Static datasets behind the analytics charts."""

from services.dashboard.schemas import (
    AnalyticsResponse,
    InsurerPerformance,
    MonthlyPoint,
    PerformanceMetric,
    ReasonSlice,
)

PERIODS = ("1month", "3months", "6months", "1year")
DEFAULT_PERIOD = "6months"

MONTHLY = [
    MonthlyPoint(month="Jan", denials=45, appeals=32, resolved=28, amount=125000),
    MonthlyPoint(month="Feb", denials=52, appeals=38, resolved=35, amount=145000),
    MonthlyPoint(month="Mar", denials=48, appeals=41, resolved=39, amount=165000),
    MonthlyPoint(month="Apr", denials=61, appeals=45, resolved=42, amount=185000),
    MonthlyPoint(month="May", denials=55, appeals=48, resolved=45, amount=195000),
    MonthlyPoint(month="Jun", denials=67, appeals=52, resolved=48, amount=215000),
]

DENIAL_REASONS = [
    ReasonSlice(name="Prior Authorization", value=35, color="#0066CC"),
    ReasonSlice(name="Medical Necessity", value=28, color="#FF6B35"),
    ReasonSlice(name="Incorrect Coding", value=18, color="#10B981"),
    ReasonSlice(name="Duplicate Claims", value=12, color="#F59E0B"),
    ReasonSlice(name="Other", value=7, color="#8B5CF6"),
]

INSURERS = [
    InsurerPerformance(name="Blue Cross", denials=45, success=73),
    InsurerPerformance(name="Aetna", denials=38, success=68),
    InsurerPerformance(name="Cigna", denials=32, success=75),
    InsurerPerformance(name="UnitedHealth", denials=28, success=71),
    InsurerPerformance(name="Humana", denials=22, success=69),
]

METRICS = [
    PerformanceMetric(title="Average Resolution Time", value="4.2 days", change="-12%", trend="down"),
    PerformanceMetric(title="Appeal Success Rate", value="73%", change="+5%", trend="up"),
    PerformanceMetric(title="Total Recovery", value="$1.2M", change="+18%", trend="up"),
    PerformanceMetric(title="Active Cases", value="89", change="+3%", trend="up"),
]


def analytics_snapshot(period: str = DEFAULT_PERIOD) -> AnalyticsResponse:
    # the period selector does not change the data yet
    return AnalyticsResponse(
        period=period,
        monthly=MONTHLY,
        denial_reasons=DENIAL_REASONS,
        insurers=INSURERS,
        metrics=METRICS,
    )
