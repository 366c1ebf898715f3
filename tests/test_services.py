"""Tests for the shared endpoint logic, independent of any HTTP framework."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from profit_api.core.exceptions import (
    AnalyticsException,
    DatabaseException,
    NotFoundException,
    PaymentProviderException,
    ValidationException,
    status_code_for,
)
from profit_api.repositories.base import PaymentRepository, UserRepository
from profit_api.repositories.memory_repository import (
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)
from profit_api.services.analytics_service import (
    daily_revenue,
    format_minor_units,
    summarize_payments,
)
from profit_api.services.billing_service import create_portal_session
from profit_api.services.user_service import lookup_user


class TestLookupUser:
    """Test user lookup validation and error mapping."""

    def setup_method(self) -> None:
        self.users = InMemoryUserRepository([
            {"id": 1, "email": "paid@example.com", "paid": True},
            {"id": 2, "email": "free@example.com", "paid": False},
        ])

    @pytest.mark.parametrize("email", [None, ""])
    def test_missing_email(self, email):
        with pytest.raises(ValidationException) as exc_info:
            lookup_user(email, self.users)

        assert exc_info.value.message == "Missing email"
        assert exc_info.value.details["field"] == "email"

    def test_not_found(self):
        with pytest.raises(NotFoundException) as exc_info:
            lookup_user("nobody@example.com", self.users)

        assert exc_info.value.message == "User not found"

    def test_found(self):
        assert lookup_user("free@example.com", self.users) == {
            "id": 2, "email": "free@example.com", "paid": False
        }

    def test_single_repository_call(self):
        users = Mock(spec=UserRepository)
        users.find_by_email.return_value = {"email": "a@x"}

        lookup_user("a@x", users)

        users.find_by_email.assert_called_once_with("a@x")
        users.find_all.assert_not_called()

    def test_hidden_fields(self):
        users = InMemoryUserRepository([{"email": "a@x", "password_hash": "secret"}])

        assert lookup_user("a@x", users, hidden_fields=["password_hash"]) == {"email": "a@x"}

    def test_repository_failure_is_wrapped(self):
        users = Mock(spec=UserRepository)
        users.find_by_email.side_effect = ConnectionError("connection refused")

        with pytest.raises(DatabaseException) as exc_info:
            lookup_user("a@x", users)

        assert exc_info.value.message == "Server error"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert status_code_for(exc_info.value) == 500


class TestSummarizePayments:
    """Test payment aggregation."""

    def test_example_payments(self):
        payments = InMemoryPaymentRepository([
            {"amount": 1000, "email": "a@x"},
            {"amount": 2000, "email": "a@x"},
            {"amount": 500, "email": "b@x"},
        ])

        summary = summarize_payments(payments)

        assert summary.total_revenue == "35.00"
        assert summary.paying_users == 2
        assert summary.transactions == 3

    def test_no_payments(self):
        summary = summarize_payments(InMemoryPaymentRepository())

        assert summary.model_dump(by_alias=True) == {
            "totalRevenue": "0.00",
            "payingUsers": 0,
            "transactions": 0,
        }

    def test_odd_cents(self):
        payments = InMemoryPaymentRepository([
            {"amount": 1, "email": "a@x"},
            {"amount": 1999, "email": "b@x"},
            {"amount": 10, "email": "c@x"},
        ])

        assert summarize_payments(payments).total_revenue == "20.10"

    def test_mock_does_not_touch_repository(self):
        payments = Mock(spec=PaymentRepository)

        summary = summarize_payments(payments, use_mock=True)

        assert summary.model_dump(by_alias=True) == {
            "totalRevenue": "12450.00",
            "payingUsers": 42,
            "transactions": 156,
        }
        payments.find_all.assert_not_called()

    def test_repository_failure(self):
        payments = Mock(spec=PaymentRepository)
        payments.find_all.side_effect = TimeoutError("query timed out")

        with pytest.raises(AnalyticsException) as exc_info:
            summarize_payments(payments)

        assert exc_info.value.message == "Could not fetch analytics"
        assert status_code_for(exc_info.value) == 500

    def test_malformed_record(self):
        payments = InMemoryPaymentRepository([{"email": "a@x", "amount": None}])

        with pytest.raises(AnalyticsException):
            summarize_payments(payments)


class TestDailyRevenue:
    """Test per-day revenue grouping."""

    def test_groups_by_day_in_order(self):
        payments = InMemoryPaymentRepository([
            {"amount": 500, "email": "a@x", "created_at": datetime(2024, 2, 29, 12, 0)},
            {"amount": 1200, "email": "b@x", "created_at": datetime(2024, 2, 28, 8, 15)},
            {"amount": 300, "email": "a@x", "created_at": datetime(2024, 2, 29, 23, 59)},
        ])

        days = daily_revenue(payments)

        assert [(day.date, day.total) for day in days] == [
            ("2024-02-28", "12.00"),
            ("2024-02-29", "8.00"),
        ]

    def test_no_payments(self):
        assert daily_revenue(InMemoryPaymentRepository()) == []

    def test_missing_timestamp(self):
        with pytest.raises(AnalyticsException):
            daily_revenue(InMemoryPaymentRepository([{"amount": 100, "email": "a@x"}]))


class TestFormatMinorUnits:
    @pytest.mark.parametrize("amount, expected", [
        (0, "0.00"),
        (5, "0.05"),
        (4500, "45.00"),
        (1245000, "12450.00"),
    ])
    def test_format(self, amount, expected):
        assert format_minor_units(amount) == expected


class TestCreatePortalSession:
    """Test billing portal delegation."""

    def test_returns_url(self):
        gateway = Mock()
        gateway.create_session.return_value = {"id": "bps_1", "url": "https://billing.example/s/1"}

        result = create_portal_session("cus_1", "https://app.example/account", gateway)

        assert result == {"url": "https://billing.example/s/1"}
        gateway.create_session.assert_called_once_with("cus_1", "https://app.example/account")

    @pytest.mark.parametrize("customer_id, return_url", [
        (None, "https://app.example/account"),
        ("cus_1", None),
        ("", ""),
    ])
    def test_missing_fields(self, customer_id, return_url):
        gateway = Mock()

        with pytest.raises(ValidationException) as exc_info:
            create_portal_session(customer_id, return_url, gateway)

        assert exc_info.value.message == "Missing customerId or returnUrl"
        gateway.create_session.assert_not_called()

    def test_provider_error(self):
        gateway = Mock()
        gateway.create_session.side_effect = RuntimeError("Invalid API Key provided")

        with pytest.raises(PaymentProviderException) as exc_info:
            create_portal_session("cus_1", "https://app.example/account", gateway)

        assert exc_info.value.message == "Invalid API Key provided"
        assert status_code_for(exc_info.value) == 400
