from fastapi import APIRouter
from src.api.rent_cycles.endpoints.rent_cycles import router as rent_cycles_router
from src.api.pg_locations.endpoints.pg_location import router as pg_location_router
from src.api.tenants.endpoints.tenant import router as tenant_router
from src.api.tenants.endpoints.tenant_payment import router as tenant_payment_router

api_router = APIRouter()

# Include all domain routers
api_router.include_router(pg_location_router)
api_router.include_router(tenant_router)
api_router.include_router(tenant_payment_router)

# reconciliation engine
api_router.include_router(rent_cycles_router)
