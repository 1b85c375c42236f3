"""
Dashboard component - Headline numbers and chart series.
"""

from .component import MONTH_NAMES, compute_stats, gather_stats, last_month_names
from .models import DashboardStats, MonthlyPoint
from .ports import ClockPort, EventListPort, MemberListPort, TransactionListPort

__all__ = [
    "compute_stats",
    "gather_stats",
    "last_month_names",
    "MONTH_NAMES",
    "DashboardStats",
    "MonthlyPoint",
    "ClockPort",
    "EventListPort",
    "MemberListPort",
    "TransactionListPort",
]
