from typing import Iterable, List, Optional

from profit_api.repositories.base import PaymentRepository, Record, UserRepository


class InMemoryUserRepository(UserRepository):
    """User store backed by a list of dicts."""

    def __init__(self, users: Iterable[Record] = ()):
        self.users = [dict(user) for user in users]

    def find_by_email(self, email: str) -> Optional[Record]:
        for user in self.users:
            if user.get("email") == email:
                return dict(user)
        return None

    def find_all(self) -> List[Record]:
        return [dict(user) for user in self.users]


class InMemoryPaymentRepository(PaymentRepository):
    """Payment store backed by a list of dicts."""

    def __init__(self, payments: Iterable[Record] = ()):
        self.payments = [dict(payment) for payment in payments]

    def find_by_email(self, email: str) -> List[Record]:
        return [dict(payment) for payment in self.payments if payment.get("email") == email]

    def find_all(self) -> List[Record]:
        return [dict(payment) for payment in self.payments]
