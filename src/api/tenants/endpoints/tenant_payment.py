from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from src.api.common.utils.database import get_db
from src.api.rent_cycles.exceptions import PeriodValidationError
from src.api.tenants.schemas.tenant_payment import (
    TenantPaymentCreate, TenantPaymentRead, TenantPaymentStatusUpdate, TenantPaymentUpdate
)
from src.api.tenants.services.tenant_payment_service import TenantPaymentService

router = APIRouter(tags=["tenant-payments"])


def get_tenant_payment_service(db: Session = Depends(get_db)) -> TenantPaymentService:
    return TenantPaymentService(db)


def _rejected_period(error: PeriodValidationError) -> HTTPException:
    # Forms show `message` verbatim and may offer the expected period instead
    return HTTPException(status_code=400, detail=error.to_dict())


@router.post("/tenants/{tenant_id}/payments", response_model=TenantPaymentRead)
def create_payment(
    tenant_id: int,
    payment_data: TenantPaymentCreate,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Record a rent payment for a tenant"""
    try:
        payment = payment_service.create_payment(tenant_id, payment_data)
    except PeriodValidationError as e:
        raise _rejected_period(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not payment:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return payment


@router.get("/tenants/{tenant_id}/payments", response_model=List[TenantPaymentRead])
def get_payments_by_tenant(
    tenant_id: int,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Get all payments of a tenant"""
    return payment_service.get_payments_by_tenant(tenant_id)


@router.get("/tenant-payments/{payment_id}", response_model=TenantPaymentRead)
def get_payment(
    payment_id: int,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Get a tenant payment by ID"""
    payment = payment_service.get_payment(payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.put("/tenant-payments/{payment_id}", response_model=TenantPaymentRead)
def update_payment(
    payment_id: int,
    payment_data: TenantPaymentUpdate,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Update a tenant payment"""
    try:
        payment = payment_service.update_payment(payment_id, payment_data)
    except PeriodValidationError as e:
        raise _rejected_period(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.patch("/tenant-payments/{payment_id}/status", response_model=TenantPaymentRead)
def update_payment_status(
    payment_id: int,
    status_data: TenantPaymentStatusUpdate,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Update the status of a tenant payment"""
    payment = payment_service.update_payment_status(
        payment_id, status_data.status, status_data.payment_date)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.delete("/tenant-payments/{payment_id}")
def delete_payment(
    payment_id: int,
    payment_service: TenantPaymentService = Depends(get_tenant_payment_service)
):
    """Delete a tenant payment"""
    success = payment_service.delete_payment(payment_id)
    if not success:
        raise HTTPException(status_code=404, detail="Payment not found")
    return {"message": "Payment deleted successfully"}
