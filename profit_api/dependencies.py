"""FastAPI dependency providers for repositories and the billing gateway."""

from fastapi import Depends
from sqlalchemy.orm import Session

from profit_api.clients.stripe_client import BillingPortalGateway, StripeBillingPortalClient
from profit_api.db.session import get_db
from profit_api.repositories.base import PaymentRepository, UserRepository
from profit_api.repositories.sqlalchemy_repository import (
    SqlAlchemyPaymentRepository,
    SqlAlchemyUserRepository,
)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_payment_repository(db: Session = Depends(get_db)) -> PaymentRepository:
    return SqlAlchemyPaymentRepository(db)


def get_billing_gateway() -> BillingPortalGateway:
    return StripeBillingPortalClient()
