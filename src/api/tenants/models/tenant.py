from typing import Optional, List, TYPE_CHECKING
from datetime import date
from sqlmodel import Field, Relationship
from src.api.common.models.base import BaseModel, TimestampMixin
from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.common.utils.encryption import encrypt_data, decrypt_data
from src.api.pg_locations.models.pg_location import PgLocation

if TYPE_CHECKING:
    from src.api.tenants.models.tenant_payment import TenantPayment


class Tenant(BaseModel, TimestampMixin, table=True):
    """
    Tenant staying at a PG location, with the phone number encrypted at rest
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)

    # Encrypted phone number
    encrypted_phone_number: str = Field(default="")

    # PgLocation relationship, which decides the rent cycle
    pg_location_id: int = Field(foreign_key="pglocation.id", index=True)
    pg_location: PgLocation = Relationship(back_populates="tenants")

    # Stay details
    joining_date: date = Field(index=True)
    check_out_date: Optional[date] = Field(default=None)
    rent_amount: float = Field(default=0)

    payments: List["TenantPayment"] = Relationship(
        back_populates="tenant",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"})

    @property
    def phone_number(self) -> str:
        """Get decrypted phone number"""
        return decrypt_data(self.encrypted_phone_number)

    @phone_number.setter
    def phone_number(self, value: Optional[str]):
        """Set encrypted phone number"""
        self.encrypted_phone_number = encrypt_data(value)

    @property
    def rent_cycle_type(self) -> Optional[CyclePolicy]:
        return self.pg_location.rent_cycle_type if self.pg_location else None
