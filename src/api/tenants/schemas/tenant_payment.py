from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from src.api.common.constants.rent_cycles import PaymentMethod, PaymentStatus
from src.api.rent_cycles.utils import CalendarDate


class TenantPaymentBase(BaseModel):
    """Base schema for tenant payment data"""
    start_date: CalendarDate
    end_date: CalendarDate
    amount_paid: float = Field(gt=0, description="Amount paid is required")
    payment_date: CalendarDate
    payment_method: PaymentMethod
    remarks: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TenantPaymentCreate(TenantPaymentBase):
    """
    Schema for creating a tenant payment.
    actual_rent_amount defaults to the tenant's rent and status is suggested
    from the amounts when omitted.
    """
    actual_rent_amount: Optional[float] = Field(default=None, gt=0)
    status: Optional[PaymentStatus] = None

    @model_validator(mode="after")
    def validate_amounts(self):
        if self.actual_rent_amount is not None and self.amount_paid > self.actual_rent_amount:
            raise ValueError(f"Amount paid cannot exceed {self.actual_rent_amount:,.2f}")
        return self


class TenantPaymentRead(TenantPaymentBase):
    """Schema for reading tenant payment data"""
    id: int
    tenant_id: int
    actual_rent_amount: float
    status: PaymentStatus
    due_amount: float
    created_at: datetime
    updated_at: datetime


class TenantPaymentUpdate(BaseModel):
    """Schema for updating tenant payment data"""
    start_date: Optional[CalendarDate] = None
    end_date: Optional[CalendarDate] = None
    amount_paid: Optional[float] = Field(default=None, gt=0)
    actual_rent_amount: Optional[float] = Field(default=None, gt=0)
    payment_date: Optional[CalendarDate] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    remarks: Optional[str] = None

    @field_validator(
        "start_date", "end_date", "amount_paid", "actual_rent_amount", "payment_date", "payment_method"
    )
    def reject_null(cls, v, info: ValidationInfo):
        # A null status asks for a fresh suggestion, the rest must be omitted to stay unchanged
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class TenantPaymentStatusUpdate(BaseModel):
    status: PaymentStatus
    payment_date: Optional[date] = None
