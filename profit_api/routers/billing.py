from typing import Optional

from fastapi import APIRouter, Depends

from profit_api.clients.stripe_client import BillingPortalGateway
from profit_api.dependencies import get_billing_gateway
from profit_api.services.billing_service import create_portal_session
from profit_api.schemas.billing import PortalSessionRequest, PortalSessionResponse
from profit_api.schemas.errors import ErrorResponse

router = APIRouter(tags=["billing"])

@router.post(
    "/create-portal-session",
    response_model=PortalSessionResponse,
    status_code=200,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}},
)
def portal_session(
    payload: Optional[PortalSessionRequest] = None,
    gateway: BillingPortalGateway = Depends(get_billing_gateway)
):
    """Create a payment-provider customer portal session and return its URL."""
    payload = payload or PortalSessionRequest()
    return create_portal_session(payload.customer_id, payload.return_url, gateway)
