from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from src.api.common.utils.database import get_db
from src.api.pg_locations.schemas.pg_location import PgLocationCreate, PgLocationRead, PgLocationUpdate
from src.api.pg_locations.services.pg_location_service import PgLocationService

router = APIRouter(prefix="/pg-locations", tags=["pg-locations"])


def get_pg_location_service(db: Session = Depends(get_db)) -> PgLocationService:
    return PgLocationService(db)


@router.post("", response_model=PgLocationRead)
def create_location(
    location_data: PgLocationCreate,
    location_service: PgLocationService = Depends(get_pg_location_service)
):
    """Create a new PG location"""
    return location_service.create_location(location_data)


@router.get("/{location_id}", response_model=PgLocationRead)
def get_location(
    location_id: int,
    location_service: PgLocationService = Depends(get_pg_location_service)
):
    """Get a PG location by ID"""
    location = location_service.get_location(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="PG location not found")
    return location


@router.get("", response_model=List[PgLocationRead])
def get_locations(
    skip: int = 0,
    limit: int = 100,
    location_service: PgLocationService = Depends(get_pg_location_service)
):
    """Get a list of PG locations"""
    return location_service.get_locations(skip, limit)


@router.put("/{location_id}", response_model=PgLocationRead)
def update_location(
    location_id: int,
    location_data: PgLocationUpdate,
    location_service: PgLocationService = Depends(get_pg_location_service)
):
    """Update a PG location"""
    location = location_service.update_location(location_id, location_data)
    if not location:
        raise HTTPException(status_code=404, detail="PG location not found")
    return location


@router.delete("/{location_id}")
def delete_location(
    location_id: int,
    location_service: PgLocationService = Depends(get_pg_location_service)
):
    """Delete a PG location"""
    try:
        success = location_service.delete_location(location_id)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not success:
        raise HTTPException(status_code=404, detail="PG location not found")
    return {"message": "PG location deleted successfully"}
