from typing import Optional, List, TYPE_CHECKING
from sqlmodel import Field, Relationship
from src.api.common.models.base import BaseModel, TimestampMixin
from src.api.common.constants.rent_cycles import CyclePolicy

if TYPE_CHECKING:
    from src.api.tenants.models.tenant import Tenant


class PgLocation(BaseModel, TimestampMixin, table=True):
    """
    A paying-guest accommodation. Its rent cycle applies to every tenant
    staying there.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    address: Optional[str] = None
    rent_cycle_type: CyclePolicy = Field(index=True)

    tenants: List["Tenant"] = Relationship(back_populates="pg_location")

