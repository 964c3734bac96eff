from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.rent_cycles.utils import CalendarDate


class TenantBase(BaseModel):
    """Base schema for tenant data"""
    name: str
    pg_location_id: int
    joining_date: CalendarDate
    check_out_date: Optional[CalendarDate] = None
    rent_amount: float = Field(default=0, ge=0)

    model_config = ConfigDict(from_attributes=True)


class TenantCreate(TenantBase):
    """Schema for creating a new tenant"""
    phone_number: Optional[str] = None  # This will be encrypted in the model

    @field_validator("name")
    def validate_name(cls, v):
        """Validate that name is not empty"""
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_stay(self):
        if self.check_out_date and self.check_out_date < self.joining_date:
            raise ValueError("Check-out date cannot be before joining date")
        return self


class TenantRead(TenantBase):
    """Schema for reading tenant data"""
    id: int
    phone_number: str  # This will be decrypted from the model
    rent_cycle_type: Optional[CyclePolicy] = None
    created_at: datetime
    updated_at: datetime


class TenantUpdate(BaseModel):
    """Schema for updating tenant data"""
    name: Optional[str] = None
    phone_number: Optional[str] = None
    pg_location_id: Optional[int] = None
    joining_date: Optional[CalendarDate] = None
    check_out_date: Optional[CalendarDate] = None
    rent_amount: Optional[float] = Field(default=None, ge=0)

    @field_validator("name", "pg_location_id", "joining_date", "rent_amount")
    def reject_null(cls, v, info: ValidationInfo):
        """Omit a field to keep it; these columns cannot be cleared"""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        if info.field_name == "name":
            if not v.strip():
                raise ValueError("Name cannot be empty")
            return v.strip()
        return v
