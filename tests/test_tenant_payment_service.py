import pytest
from datetime import date

from src.api.common.constants.rent_cycles import CyclePolicy, PaymentMethod, PaymentStatus
from src.api.rent_cycles.exceptions import PeriodValidationError
from src.api.tenants.models.tenant_payment import TenantPayment
from src.api.tenants.schemas.tenant_payment import (
    TenantPaymentCreate, TenantPaymentRead, TenantPaymentUpdate
)
from src.api.tenants.services.tenant_payment_service import TenantPaymentService, suggest_payment_status


class TestSuggestPaymentStatus:
    """Test the status suggested from the amounts"""

    def test_suggest_payment_status(self):
        """Test PAID, PARTIAL and PENDING thresholds"""
        assert suggest_payment_status(8000, 8000) == PaymentStatus.PAID
        assert suggest_payment_status(8500, 8000) == PaymentStatus.PAID
        assert suggest_payment_status(100, 8000) == PaymentStatus.PARTIAL
        assert suggest_payment_status(0, 8000) == PaymentStatus.PENDING


class TestTenantPaymentService:
    """Test TenantPaymentService class"""

    def test_create_payment_success(self, test_session, test_data_factory, sample_payment_data):
        """Test recording a full CALENDAR month"""
        tenant = test_data_factory.create_tenant(test_session)
        service = TenantPaymentService(test_session)

        result = service.create_payment(tenant.id, TenantPaymentCreate(**sample_payment_data))

        assert result.id is not None
        assert result.tenant_id == tenant.id
        assert result.actual_rent_amount == 8000.0  # Defaults to the tenant's rent
        assert result.status == PaymentStatus.PAID
        assert result.due_amount == 0

        # Verify it's in the database
        assert test_session.get(TenantPayment, result.id) is not None

    def test_update_payment_rejects_null_amount(self, test_session, test_data_factory):
        """Test null amounts are refused before the stored payment is touched"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31))

        with pytest.raises(ValueError, match="amount_paid cannot be null"):
            TenantPaymentUpdate(amount_paid=None)

        result = TenantPaymentService(test_session).update_payment(
            payment.id, TenantPaymentUpdate(status=None))

        assert result.amount_paid == 8000.0
        assert result.status == PaymentStatus.PAID

    def test_create_partial_payment(self, test_session, test_data_factory, sample_payment_data):
        """Test a partial payment keeps the amount still due"""
        tenant = test_data_factory.create_tenant(test_session)
        sample_payment_data["amount_paid"] = 5000.0

        result = TenantPaymentService(test_session).create_payment(
            tenant.id, TenantPaymentCreate(**sample_payment_data))

        assert result.status == PaymentStatus.PARTIAL
        assert result.due_amount == 3000.0

    def test_create_payment_explicit_status(self, test_session, test_data_factory, sample_payment_data):
        """Test an explicit status is not overridden"""
        tenant = test_data_factory.create_tenant(test_session)
        sample_payment_data["status"] = PaymentStatus.PENDING
        sample_payment_data["payment_method"] = PaymentMethod.BANK_TRANSFER

        result = TenantPaymentService(test_session).create_payment(
            tenant.id, TenantPaymentCreate(**sample_payment_data))

        assert result.status == PaymentStatus.PENDING

    def test_create_payment_period_off_cycle(self, test_session, test_data_factory, sample_payment_data):
        """Test a period that breaks the CALENDAR cycle is rejected"""
        tenant = test_data_factory.create_tenant(test_session)
        sample_payment_data["start_date"] = date(2024, 1, 15)
        sample_payment_data["end_date"] = date(2024, 2, 14)

        with pytest.raises(PeriodValidationError) as exc_info:
            TenantPaymentService(test_session).create_payment(
                tenant.id, TenantPaymentCreate(**sample_payment_data))

        assert exc_info.value.expected_start == date(2024, 1, 1)
        assert TenantPaymentService(test_session).get_payments_by_tenant(tenant.id) == []

    def test_create_payment_midmonth_location(self, test_session, test_data_factory, sample_payment_data):
        """Test a MIDMONTH period is accepted at a MIDMONTH location"""
        location = test_data_factory.create_pg_location(test_session, rent_cycle_type=CyclePolicy.MIDMONTH)
        tenant = test_data_factory.create_tenant(
            test_session, pg_location_id=location.id, joining_date=date(2025, 11, 15))
        sample_payment_data["start_date"] = date(2025, 11, 15)
        sample_payment_data["end_date"] = date(2025, 12, 14)

        result = TenantPaymentService(test_session).create_payment(
            tenant.id, TenantPaymentCreate(**sample_payment_data))

        assert result.end_date == date(2025, 12, 14)

    def test_create_payment_exceeding_rent(self, test_session, test_data_factory, sample_payment_data):
        """Test paying more than the tenant's rent is rejected"""
        tenant = test_data_factory.create_tenant(test_session)
        sample_payment_data["amount_paid"] = 9000.0

        with pytest.raises(ValueError, match="cannot exceed 8,000.00"):
            TenantPaymentService(test_session).create_payment(
                tenant.id, TenantPaymentCreate(**sample_payment_data))

    def test_create_payment_schema_amount_validation(self, sample_payment_data):
        """Test amount paid cannot exceed the rent given in the request"""
        sample_payment_data["actual_rent_amount"] = 5000.0

        with pytest.raises(ValueError):
            TenantPaymentCreate(**sample_payment_data)

        sample_payment_data["amount_paid"] = 0
        with pytest.raises(ValueError):
            TenantPaymentCreate(**sample_payment_data)

    def test_create_payment_tenant_not_found(self, test_session, sample_payment_data):
        """Test recording a payment for a missing tenant"""
        result = TenantPaymentService(test_session).create_payment(
            999, TenantPaymentCreate(**sample_payment_data))

        assert result is None

    def test_get_payments_by_tenant_ordered(self, test_session, test_data_factory):
        """Test payments are listed oldest period first"""
        tenant = test_data_factory.create_tenant(test_session)
        test_data_factory.create_payment(test_session, tenant.id, date(2024, 3, 1), date(2024, 3, 31))
        test_data_factory.create_payment(test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31))

        result = TenantPaymentService(test_session).get_payments_by_tenant(tenant.id)

        assert [p.start_date for p in result] == [date(2024, 1, 1), date(2024, 3, 1)]

    def test_payment_read_schema(self, test_session, test_data_factory):
        """Test reading a payment includes the due amount"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31),
            amount_paid=6000.0, status=PaymentStatus.PARTIAL)

        result = TenantPaymentRead.model_validate(payment)

        assert result.due_amount == 2000.0
        assert result.status == PaymentStatus.PARTIAL

    def test_update_payment_amount_resuggests_status(self, test_session, test_data_factory):
        """Test topping up a partial payment marks it paid"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31),
            amount_paid=6000.0, status=PaymentStatus.PARTIAL)

        result = TenantPaymentService(test_session).update_payment(
            payment.id, TenantPaymentUpdate(amount_paid=8000.0))

        assert result.status == PaymentStatus.PAID
        assert result.due_amount == 0

    def test_update_payment_period_off_cycle(self, test_session, test_data_factory):
        """Test moving a payment onto an invalid period is rejected"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31))

        with pytest.raises(PeriodValidationError):
            TenantPaymentService(test_session).update_payment(
                payment.id, TenantPaymentUpdate(end_date="2024-02-15"))

    def test_update_payment_period(self, test_session, test_data_factory):
        """Test moving a payment to another whole month"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31))

        result = TenantPaymentService(test_session).update_payment(
            payment.id, TenantPaymentUpdate(start_date="2024-02-01", end_date="2024-02-29"))

        assert result.start_date == date(2024, 2, 1)
        assert result.end_date == date(2024, 2, 29)

    def test_update_payment_not_found(self, test_session):
        """Test updating non-existent payment"""
        assert TenantPaymentService(test_session).update_payment(999, TenantPaymentUpdate(remarks="x")) is None

    def test_update_payment_status(self, test_session, test_data_factory):
        """Test marking a pending transfer as paid"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31), status=PaymentStatus.PENDING)

        result = TenantPaymentService(test_session).update_payment_status(
            payment.id, PaymentStatus.PAID, date(2024, 1, 5))

        assert result.status == PaymentStatus.PAID
        assert result.payment_date == date(2024, 1, 5)

    def test_delete_payment(self, test_session, test_data_factory):
        """Test deleting a payment"""
        tenant = test_data_factory.create_tenant(test_session)
        payment = test_data_factory.create_payment(
            test_session, tenant.id, date(2024, 1, 1), date(2024, 1, 31))
        service = TenantPaymentService(test_session)

        assert service.delete_payment(payment.id) is True
        assert service.get_payment(payment.id) is None
        assert service.delete_payment(payment.id) is False
