from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from profit_api.core.config import settings


class StripeError(Exception):
    """Error returned by the Stripe API, carrying Stripe's own message."""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class BillingPortalGateway(ABC):
    @abstractmethod
    def create_session(self, customer_id: str, return_url: str) -> Dict[str, Any]:
        """Create a billing-portal session and return the provider's session object."""
        ...


class StripeBillingPortalClient(BillingPortalGateway):
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key or settings.stripe_secret_key
        self.api_base = (api_base or settings.stripe_api_base).rstrip("/")
        self.timeout = timeout or settings.stripe_timeout_seconds

    def create_session(self, customer_id: str, return_url: str) -> Dict[str, Any]:
        if not self.api_key:
            raise StripeError("Stripe secret key is not configured")

        response = requests.post(
            f"{self.api_base}/billing_portal/sessions",
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Accept": "application/json",
            },
            data={"customer": customer_id, "return_url": return_url},
            timeout=self.timeout
        )

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            error = body.get("error") if isinstance(body.get("error"), dict) else {}
            raise StripeError(
                error.get("message") or f"Stripe API request failed with status {response.status_code}",
                status_code=response.status_code,
                code=error.get("code")
            )

        if not body.get("url"):
            raise StripeError(
                "Stripe did not return a billing portal URL",
                status_code=response.status_code
            )
        return body
