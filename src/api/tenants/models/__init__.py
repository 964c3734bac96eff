"""Tenants models package."""
from src.api.tenants.models.tenant import Tenant
from src.api.tenants.models.tenant_payment import TenantPayment

__all__ = ["Tenant", "TenantPayment"]
