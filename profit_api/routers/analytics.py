from typing import List

from fastapi import APIRouter, Depends

from profit_api.dependencies import get_payment_repository
from profit_api.repositories.base import PaymentRepository
from profit_api.services.analytics_service import daily_revenue, summarize_payments
from profit_api.schemas.analytics import AnalyticsSummary, DailyRevenue
from profit_api.schemas.errors import ErrorResponse
from profit_api.core.config import settings

router = APIRouter(prefix="/analytics", tags=["analytics"])

ERROR_RESPONSES = {405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/summary", response_model=AnalyticsSummary, status_code=200, responses=ERROR_RESPONSES)
async def analytics_summary(payments: PaymentRepository = Depends(get_payment_repository)):
    return summarize_payments(payments, use_mock=settings.analytics_use_mock)


@router.get("/daily", response_model=List[DailyRevenue], status_code=200, responses=ERROR_RESPONSES)
async def analytics_daily(payments: PaymentRepository = Depends(get_payment_repository)):
    return daily_revenue(payments)
