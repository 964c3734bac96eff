from typing import List, Optional
from datetime import date
from fastapi.logger import logger
from sqlmodel import Session, select
from src.api.common.constants.rent_cycles import PaymentStatus
from src.api.rent_cycles.exceptions import PeriodValidationError
from src.api.rent_cycles.services.period_validator import ensure_valid_period
from src.api.tenants.models.tenant import Tenant
from src.api.tenants.models.tenant_payment import TenantPayment
from src.api.tenants.schemas.tenant_payment import TenantPaymentCreate, TenantPaymentUpdate


def suggest_payment_status(amount_paid: float, rent_amount: float) -> PaymentStatus:
    """PAID when the amount covers the rent, PARTIAL when something was paid, else PENDING."""
    if amount_paid >= rent_amount:
        return PaymentStatus.PAID
    if amount_paid > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PENDING


class TenantPaymentService:
    def __init__(self, db: Session):
        self.db = db

    def _ensure_period_fits_cycle(self, tenant: Tenant, start_date: date, end_date: date) -> None:
        """Raise PeriodValidationError if the period breaks the PG location's rent cycle"""
        try:
            ensure_valid_period((start_date, end_date), tenant.rent_cycle_type)
        except PeriodValidationError as e:
            logger.warning(
                f"Tenant {tenant.id}: rejected payment period {start_date} to {end_date}: {e.reason}")
            raise

    @staticmethod
    def _ensure_amount_within_rent(amount_paid: float, rent_amount: float) -> None:
        if amount_paid > rent_amount:
            raise ValueError(f"Amount paid cannot exceed {rent_amount:,.2f}")

    def create_payment(self, tenant_id: int, payment_data: TenantPaymentCreate) -> Optional[TenantPayment]:
        """
        Record a rent payment for a tenant.

        Returns None if the tenant does not exist.

        Raises:
            PeriodValidationError: if the period does not follow the rent cycle
            ValueError: if the amount paid exceeds the rent for the period
        """
        tenant = self.db.get(Tenant, tenant_id)
        if not tenant:
            return None

        self._ensure_period_fits_cycle(tenant, payment_data.start_date, payment_data.end_date)

        actual_rent_amount = payment_data.actual_rent_amount or tenant.rent_amount
        self._ensure_amount_within_rent(payment_data.amount_paid, actual_rent_amount)

        status = payment_data.status or suggest_payment_status(
            payment_data.amount_paid, actual_rent_amount)

        payment = TenantPayment(
            **payment_data.model_dump(exclude={"actual_rent_amount", "status"}),
            tenant_id=tenant.id,
            actual_rent_amount=actual_rent_amount,
            status=status,
        )

        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        logger.info(
            f"Tenant {tenant.id}: recorded {payment.status.value} payment {payment.id} "
            f"for {payment.start_date} to {payment.end_date}")
        return payment

    def get_payment(self, payment_id: int) -> Optional[TenantPayment]:
        """Get a payment by ID"""
        return self.db.get(TenantPayment, payment_id)

    def get_payments_by_tenant(self, tenant_id: int) -> List[TenantPayment]:
        """Get all payments of a tenant, oldest period first"""
        statement = select(TenantPayment).where(
            TenantPayment.tenant_id == tenant_id
        ).order_by(TenantPayment.start_date, TenantPayment.id)
        return self.db.exec(statement).all()

    def update_payment(self, payment_id: int, payment_data: TenantPaymentUpdate) -> Optional[TenantPayment]:
        """
        Update a payment. A changed period is validated against the rent cycle
        again, and the status is re-suggested when amounts change without an
        explicit status.
        """
        payment = self.db.get(TenantPayment, payment_id)
        if not payment:
            return None

        payment_data_dict = payment_data.model_dump(exclude_unset=True)

        start_date = payment_data_dict.get("start_date", payment.start_date)
        end_date = payment_data_dict.get("end_date", payment.end_date)
        if "start_date" in payment_data_dict or "end_date" in payment_data_dict:
            self._ensure_period_fits_cycle(payment.tenant, start_date, end_date)

        amount_paid = payment_data_dict.get("amount_paid", payment.amount_paid)
        actual_rent_amount = payment_data_dict.get("actual_rent_amount", payment.actual_rent_amount)
        amounts_changed = "amount_paid" in payment_data_dict or "actual_rent_amount" in payment_data_dict
        if amounts_changed:
            self._ensure_amount_within_rent(amount_paid, actual_rent_amount)
            if payment_data_dict.get("status") is None:
                payment_data_dict["status"] = suggest_payment_status(amount_paid, actual_rent_amount)

        for key, value in payment_data_dict.items():
            if value is None and key == "status":
                continue
            setattr(payment, key, value)
        payment.touch()

        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        logger.info(f"TenantPayment {payment.id}: updated {sorted(payment_data_dict)}")
        return payment

    def update_payment_status(self, payment_id: int, status: PaymentStatus,
                              payment_date: Optional[date] = None) -> Optional[TenantPayment]:
        """Update the status of a payment, e.g. when a pending transfer clears"""
        payment = self.db.get(TenantPayment, payment_id)
        if not payment:
            return None

        if payment.status != status:
            logger.info(f"TenantPayment {payment.id}: status changed from {payment.status} to {status}")
        payment.status = status
        if payment_date:
            payment.payment_date = payment_date
        payment.touch()

        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        return payment

    def delete_payment(self, payment_id: int) -> bool:
        """Delete a payment. The period shows up as a gap again."""
        payment = self.db.get(TenantPayment, payment_id)
        if not payment:
            return False

        self.db.delete(payment)
        self.db.commit()
        logger.info(f"TenantPayment {payment_id}: deleted")
        return True
