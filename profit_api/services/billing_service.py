from typing import Dict, Optional

from profit_api.clients.stripe_client import BillingPortalGateway
from profit_api.core.logger import logger
from profit_api.core.exceptions import PaymentProviderException, ValidationException


def create_portal_session(
    customer_id: Optional[str],
    return_url: Optional[str],
    gateway: BillingPortalGateway
) -> Dict[str, str]:
    """
    Create a customer billing-portal session with the payment provider.

    Args:
        customer_id: Provider customer identifier
        return_url: Where the provider sends the customer back to
        gateway: Billing-portal gateway to delegate to

    Returns:
        ``{"url": ...}`` for the new session

    Raises:
        ValidationException: If either field is missing
        PaymentProviderException: If the provider raises, with its message
    """
    if not customer_id or not return_url:
        raise ValidationException("Missing customerId or returnUrl", field="customerId")

    try:
        session = gateway.create_session(customer_id, return_url)
        url = session["url"]
    except Exception as e:
        logger.error(
            f"Billing portal error: {str(e)}",
            extra={"customer_id": customer_id},
            exc_info=True
        )
        raise PaymentProviderException(str(e)) from e

    logger.info("Billing portal session created", extra={"customer_id": customer_id})
    return {"url": url}
