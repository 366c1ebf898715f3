from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, List

from profit_api.repositories.base import PaymentRepository
from profit_api.schemas.analytics import AnalyticsSummary, DailyRevenue
from profit_api.core.logger import logger
from profit_api.core.exceptions import AnalyticsException

# Served when analytics run in mock mode
MOCK_SUMMARY = {
    "total_revenue": "12450.00",
    "paying_users": 42,
    "transactions": 156,
}


def format_minor_units(amount: int) -> str:
    """Convert minor currency units to a major-unit string with two decimals."""
    return f"{Decimal(amount) / 100:.2f}"


def _fetch_payments(payments: PaymentRepository) -> List[Dict[str, Any]]:
    try:
        return payments.find_all()
    except Exception as e:
        logger.error(f"Could not fetch payments: {str(e)}", exc_info=True)
        raise AnalyticsException(operation="find_all_payments") from e


def summarize_payments(payments: PaymentRepository, use_mock: bool = False) -> AnalyticsSummary:
    """
    Aggregate every payment into revenue, paying-user and transaction counts.

    Args:
        payments: Payment repository to read from
        use_mock: Return the fixed mock summary without touching the repository

    Returns:
        AnalyticsSummary for all payments

    Raises:
        AnalyticsException: If payments cannot be fetched or aggregated
    """
    if use_mock:
        return AnalyticsSummary(**MOCK_SUMMARY)

    records = _fetch_payments(payments)
    try:
        total = sum(record["amount"] for record in records)
        paying_users = len({record["email"] for record in records})
    except (KeyError, TypeError) as e:
        logger.error(f"Malformed payment record: {str(e)}", exc_info=True)
        raise AnalyticsException(operation="aggregate_payments") from e

    return AnalyticsSummary(
        total_revenue=format_minor_units(total),
        paying_users=paying_users,
        transactions=len(records)
    )


def daily_revenue(payments: PaymentRepository) -> List[DailyRevenue]:
    """Sum payments per calendar day, oldest day first."""
    records = _fetch_payments(payments)

    totals: Dict[str, int] = defaultdict(int)
    try:
        for record in records:
            totals[record["created_at"].strftime("%Y-%m-%d")] += record["amount"]
    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"Malformed payment record: {str(e)}", exc_info=True)
        raise AnalyticsException(operation="aggregate_daily_revenue") from e

    return [
        DailyRevenue(date=day, total=format_minor_units(totals[day]))
        for day in sorted(totals)
    ]
