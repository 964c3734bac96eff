from typing import Optional, TYPE_CHECKING
from datetime import date
from sqlmodel import Field, Relationship
from src.api.common.models.base import BaseModel, TimestampMixin
from src.api.common.constants.rent_cycles import PaymentMethod, PaymentStatus

if TYPE_CHECKING:
    from src.api.tenants.models.tenant import Tenant


class TenantPayment(BaseModel, TimestampMixin, table=True):
    """
    Rent payment covering one billing period of a tenant.
    start_date/end_date are inclusive and follow the PG location's rent cycle.
    """
    id: Optional[int] = Field(default=None, primary_key=True)

    tenant_id: int = Field(foreign_key="tenant.id", index=True)
    tenant: "Tenant" = Relationship(back_populates="payments")

    # Period covered by this payment
    start_date: date = Field(index=True)
    end_date: date = Field(index=True)

    amount_paid: float
    actual_rent_amount: float
    payment_date: date
    payment_method: PaymentMethod
    status: PaymentStatus = Field(default=PaymentStatus.PENDING, index=True)
    remarks: Optional[str] = Field(default=None)

    @property
    def due_amount(self) -> float:
        """Rent still owed for this period"""
        return round(max(self.actual_rent_amount - self.amount_paid, 0), 2)
