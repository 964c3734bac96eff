from typing import List, Optional
from sqlmodel import Session, select
from src.api.pg_locations.models.pg_location import PgLocation
from src.api.tenants.models.tenant import Tenant
from src.api.tenants.schemas.tenant import TenantCreate, TenantUpdate


class TenantService:
    def __init__(self, db: Session):
        self.db = db

    def create_tenant(self, tenant_data: TenantCreate) -> Optional[Tenant]:
        """Create a new tenant. Returns None if the PG location does not exist."""
        if not self.db.get(PgLocation, tenant_data.pg_location_id):
            return None

        tenant = Tenant(**tenant_data.model_dump(exclude={"phone_number"}))
        tenant.phone_number = tenant_data.phone_number  # This will encrypt the phone number

        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def get_tenant(self, tenant_id: int) -> Optional[Tenant]:
        """Get a tenant by ID"""
        return self.db.get(Tenant, tenant_id)

    def get_tenants(self, skip: int = 0, limit: int = 100, pg_location_id: Optional[int] = None) -> List[Tenant]:
        """Get tenants ordered by name, optionally for one PG location"""
        statement = select(Tenant)
        if pg_location_id is not None:
            statement = statement.where(Tenant.pg_location_id == pg_location_id)
        statement = statement.order_by(Tenant.name).offset(skip).limit(limit)
        return self.db.exec(statement).all()

    def update_tenant(self, tenant_id: int, tenant_data: TenantUpdate) -> Optional[Tenant]:
        """Update a tenant"""
        tenant = self.db.get(Tenant, tenant_id)
        if not tenant:
            return None

        tenant_data_dict = tenant_data.model_dump(exclude_unset=True)

        # Handle encrypted fields separately
        if "phone_number" in tenant_data_dict:
            tenant.phone_number = tenant_data_dict.pop("phone_number")

        if "pg_location_id" in tenant_data_dict and not self.db.get(PgLocation, tenant_data_dict["pg_location_id"]):
            raise ValueError(f"PG location {tenant_data_dict['pg_location_id']} not found")

        for key, value in tenant_data_dict.items():
            setattr(tenant, key, value)

        if tenant.check_out_date and tenant.check_out_date < tenant.joining_date:
            self.db.rollback()
            raise ValueError("Check-out date cannot be before joining date")

        tenant.touch()
        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def delete_tenant(self, tenant_id: int) -> bool:
        """Delete a tenant together with their payments"""
        tenant = self.db.get(Tenant, tenant_id)
        if not tenant:
            return False

        self.db.delete(tenant)
        self.db.commit()
        return True
