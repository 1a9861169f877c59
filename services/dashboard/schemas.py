"""Pydantic schemas for dashboard and analytics."""

from pydantic import BaseModel
from typing import List
from common.enums import DataSource
from services.denials.schemas import DenialRow


class DashboardStats(BaseModel):
    total_denials: int
    pending_denials: int
    appealing_denials: int
    resolved_denials: int
    total_appeals: int
    total_amount: float


class StatCard(BaseModel):
    title: str
    value: str


class DashboardResponse(BaseModel):
    source: DataSource
    stats: DashboardStats
    cards: List[StatCard]
    recent_denials: List[DenialRow]


class MonthlyPoint(BaseModel):
    month: str
    denials: int
    appeals: int
    resolved: int
    amount: float


class ReasonSlice(BaseModel):
    name: str
    value: int
    color: str


class InsurerPerformance(BaseModel):
    name: str
    denials: int
    success: int


class PerformanceMetric(BaseModel):
    title: str
    value: str
    change: str
    trend: str


class AnalyticsResponse(BaseModel):
    period: str
    monthly: List[MonthlyPoint]
    denial_reasons: List[ReasonSlice]
    insurers: List[InsurerPerformance]
    metrics: List[PerformanceMetric]
