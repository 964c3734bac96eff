from typing import List, Optional
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.logger import logger
from sqlmodel import Session
from src.api.common.utils.database import get_db
from src.api.rent_cycles.exceptions import RentCycleError
from src.api.tenants.schemas.payment_gaps import NextPaymentDates, PaymentGapReport
from src.api.tenants.schemas.tenant import TenantCreate, TenantRead, TenantUpdate
from src.api.tenants.services.payment_gap_service import PaymentGapService
from src.api.tenants.services.tenant_service import TenantService

router = APIRouter(prefix="/tenants", tags=["tenants"])


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(db)


def get_payment_gap_service(db: Session = Depends(get_db)) -> PaymentGapService:
    return PaymentGapService(db)


@router.post("", response_model=TenantRead)
def create_tenant(
    tenant_data: TenantCreate,
    tenant_service: TenantService = Depends(get_tenant_service)
):
    """Create a new tenant"""
    tenant = tenant_service.create_tenant(tenant_data)
    if not tenant:
        raise HTTPException(status_code=404, detail="PG location not found")
    return tenant


@router.get("/{tenant_id}", response_model=TenantRead)
def get_tenant(
    tenant_id: int,
    tenant_service: TenantService = Depends(get_tenant_service)
):
    """Get a tenant by ID"""
    tenant = tenant_service.get_tenant(tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.get("", response_model=List[TenantRead])
def get_tenants(
    skip: int = 0,
    limit: int = 100,
    pg_location_id: Optional[int] = None,
    tenant_service: TenantService = Depends(get_tenant_service)
):
    """Get a list of tenants"""
    return tenant_service.get_tenants(skip, limit, pg_location_id)


@router.put("/{tenant_id}", response_model=TenantRead)
def update_tenant(
    tenant_id: int,
    tenant_data: TenantUpdate,
    tenant_service: TenantService = Depends(get_tenant_service)
):
    """Update a tenant"""
    try:
        tenant = tenant_service.update_tenant(tenant_id, tenant_data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.delete("/{tenant_id}")
def delete_tenant(
    tenant_id: int,
    tenant_service: TenantService = Depends(get_tenant_service)
):
    """Delete a tenant"""
    success = tenant_service.delete_tenant(tenant_id)
    if not success:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return {"message": "Tenant deleted successfully"}


@router.get("/{tenant_id}/payment-gaps", response_model=PaymentGapReport)
def get_payment_gaps(
    tenant_id: int,
    as_of: Optional[date] = Query(None, description="Reconcile up to this date. Defaults to today"),
    gap_service: PaymentGapService = Depends(get_payment_gap_service)
):
    """Rent periods since joining that no payment covers"""
    try:
        report = gap_service.get_payment_gaps(tenant_id, as_of)
    except RentCycleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to reconcile payments of tenant {tenant_id}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to reconcile payments: {str(e)}"
        )
    if not report:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return report


@router.get("/{tenant_id}/next-payment-dates", response_model=NextPaymentDates)
def get_next_payment_dates(
    tenant_id: int,
    skip_gaps: bool = Query(True, description="Continue after the latest payment instead of filling the earliest gap"),
    gap_service: PaymentGapService = Depends(get_payment_gap_service)
):
    """Suggested period for the next payment of a tenant"""
    try:
        next_dates = gap_service.get_next_payment_dates(tenant_id, skip_gaps)
    except RentCycleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to suggest next payment dates for tenant {tenant_id}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to suggest next payment dates: {str(e)}"
        )
    if not next_dates:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return next_dates
