from typing import List, Optional
from fastapi.logger import logger
from sqlmodel import Session, select
from src.api.pg_locations.models.pg_location import PgLocation
from src.api.pg_locations.schemas.pg_location import PgLocationCreate, PgLocationUpdate


class PgLocationService:
    def __init__(self, db: Session):
        self.db = db

    def create_location(self, location_data: PgLocationCreate) -> PgLocation:
        """Create a new PG location"""
        location = PgLocation(**location_data.model_dump())

        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        return location

    def get_location(self, location_id: int) -> Optional[PgLocation]:
        """Get a PG location by ID"""
        return self.db.get(PgLocation, location_id)

    def get_locations(self, skip: int = 0, limit: int = 100) -> List[PgLocation]:
        """Get PG locations ordered by name"""
        statement = select(PgLocation).order_by(PgLocation.name).offset(skip).limit(limit)
        return self.db.exec(statement).all()

    def update_location(self, location_id: int, location_data: PgLocationUpdate) -> Optional[PgLocation]:
        """
        Update a PG location.

        Changing the rent cycle only affects periods computed from now on;
        payments already recorded keep their dates.
        """
        location = self.db.get(PgLocation, location_id)
        if not location:
            return None

        location_data_dict = location_data.model_dump(exclude_unset=True)
        new_cycle = location_data_dict.get("rent_cycle_type")
        if new_cycle is not None and new_cycle != location.rent_cycle_type:
            logger.info(
                f"PgLocation {location.id}: rent cycle changed from "
                f"{location.rent_cycle_type} to {new_cycle}")

        for key, value in location_data_dict.items():
            setattr(location, key, value)
        location.touch()

        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        return location

    def delete_location(self, location_id: int) -> bool:
        """Delete a PG location. Locations with tenants are kept."""
        location = self.db.get(PgLocation, location_id)
        if not location:
            return False
        if location.tenants:
            raise ValueError(
                f"PG location {location_id} still has {len(location.tenants)} tenant(s)")

        self.db.delete(location)
        self.db.commit()
        return True
