"""
Data-access ports for users and payments.

Handlers depend on these narrow interfaces instead of the ORM, so the
database can be swapped for an in-memory store in tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class UserRepository(ABC):
    """Read access to user records."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Record]:
        """
        Retrieve the user with the given unique email.

        Args:
            email: Email address of the user

        Returns:
            The full user record if found, None otherwise
        """
        ...

    @abstractmethod
    def find_all(self) -> List[Record]:
        """Return every user record."""
        ...


class PaymentRepository(ABC):
    """Read access to payment records."""

    @abstractmethod
    def find_by_email(self, email: str) -> List[Record]:
        """
        Retrieve every payment made by the given email.

        Args:
            email: Email address the payments are associated with

        Returns:
            List of payment records, possibly empty
        """
        ...

    @abstractmethod
    def find_all(self) -> List[Record]:
        """Return every payment record, unpaginated."""
        ...
