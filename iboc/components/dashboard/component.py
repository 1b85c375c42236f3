"""
Dashboard component - Headline numbers and chart series.

Monthly buckets are keyed by month abbreviation only: a transaction from
the same month of an earlier year is counted in that month's bucket.
"""

import asyncio
from datetime import datetime

from iboc.components.events import next_upcoming_event
from iboc.domain.entities import ChurchEvent, Member, Transaction

from .models import DashboardStats, MonthlyPoint
from .ports import ClockPort, EventListPort, MemberListPort, TransactionListPort

MONTH_NAMES = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]
MONTHS_SHOWN = 6


def last_month_names(now: datetime, count: int = MONTHS_SHOWN) -> list[str]:
    """Abbreviations of the last `count` calendar months, oldest first."""
    names = []
    for back in range(count - 1, -1, -1):
        month_index = (now.month - 1 - back) % 12
        names.append(MONTH_NAMES[month_index])
    return names


def compute_stats(
    members: list[Member],
    transactions: list[Transaction],
    events: list[ChurchEvent],
    now: datetime,
) -> DashboardStats:
    stats = DashboardStats(
        total_members=len(members),
        active_members=sum(1 for m in members if m.status == "Ativo"),
    )

    monthly = {name: MonthlyPoint(name=name) for name in last_month_names(now)}
    for t in transactions:
        amount = float(t.amount)
        bucket = monthly.get(MONTH_NAMES[t.date.month - 1])
        if t.type == "Entrada":
            stats.income += amount
            stats.income_by_category[t.category] = (
                stats.income_by_category.get(t.category, 0.0) + amount
            )
            if bucket:
                bucket.income += amount
        else:
            stats.expenses += amount
            if bucket:
                bucket.expense += amount

    stats.balance = stats.income - stats.expenses
    stats.monthly = list(monthly.values())
    stats.next_event = next_upcoming_event(events, now)
    return stats


async def gather_stats(
    member_repo: MemberListPort,
    transaction_repo: TransactionListPort,
    event_repo: EventListPort,
    clock: ClockPort,
) -> DashboardStats:
    """Read the three collections concurrently, then aggregate."""
    members, transactions, events = await asyncio.gather(
        asyncio.to_thread(member_repo.list_all),
        asyncio.to_thread(transaction_repo.list_all),
        asyncio.to_thread(event_repo.list_all),
    )
    return compute_stats(members, transactions, events, clock.now())
