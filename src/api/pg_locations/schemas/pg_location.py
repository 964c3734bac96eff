from typing import Optional
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from datetime import datetime
from src.api.common.constants.rent_cycles import CyclePolicy


class PgLocationBase(BaseModel):
    """Base schema for PG location data"""
    name: str
    address: Optional[str] = None
    rent_cycle_type: CyclePolicy

    model_config = ConfigDict(from_attributes=True)

    @field_validator("name")
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class PgLocationCreate(PgLocationBase):
    """Schema for creating a new PG location"""
    pass


class PgLocationRead(PgLocationBase):
    """Schema for reading PG location data"""
    id: int
    created_at: datetime
    updated_at: datetime


class PgLocationUpdate(BaseModel):
    """Schema for updating PG location data"""
    name: Optional[str] = None
    address: Optional[str] = None
    rent_cycle_type: Optional[CyclePolicy] = None

    @field_validator("name", "rent_cycle_type")
    def reject_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        if info.field_name == "name":
            if not v.strip():
                raise ValueError("Name cannot be empty")
            return v.strip()
        return v
