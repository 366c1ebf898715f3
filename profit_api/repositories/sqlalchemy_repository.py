from typing import List, Optional

from sqlalchemy.orm import Session

from profit_api.models.payment import Payment
from profit_api.models.user import User
from profit_api.repositories.base import PaymentRepository, Record, UserRepository


def row_to_record(row) -> Record:
    """Copy every mapped column of an ORM row into a plain dict."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[Record]:
        user = self.db.query(User).filter(User.email == email).one_or_none()
        return row_to_record(user) if user is not None else None

    def find_all(self) -> List[Record]:
        return [row_to_record(user) for user in self.db.query(User).order_by(User.id).all()]


class SqlAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> List[Record]:
        payments = self.db.query(Payment).filter(Payment.email == email).order_by(Payment.id).all()
        return [row_to_record(payment) for payment in payments]

    def find_all(self) -> List[Record]:
        return [row_to_record(payment) for payment in self.db.query(Payment).order_by(Payment.id).all()]
