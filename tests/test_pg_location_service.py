import pytest

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.pg_locations.models.pg_location import PgLocation
from src.api.pg_locations.schemas.pg_location import PgLocationCreate, PgLocationUpdate
from src.api.pg_locations.services.pg_location_service import PgLocationService


class TestPgLocationService:
    """Test PgLocationService class"""

    def test_create_location_success(self, test_session, sample_pg_location_data):
        """Test successful PG location creation"""
        service = PgLocationService(test_session)

        result = service.create_location(PgLocationCreate(**sample_pg_location_data))

        assert result.id is not None
        assert result.name == "Sunrise PG"
        assert result.rent_cycle_type == CyclePolicy.CALENDAR

        # Verify it's in the database
        db_location = test_session.get(PgLocation, result.id)
        assert db_location is not None

    def test_create_location_strips_name(self):
        """Test the name is trimmed and cannot be blank"""
        assert PgLocationCreate(name="  Lake View  ", rent_cycle_type="MIDMONTH").name == "Lake View"
        with pytest.raises(ValueError):
            PgLocationCreate(name="   ", rent_cycle_type="MIDMONTH")

    def test_create_location_requires_rent_cycle(self):
        """Test the rent cycle is mandatory"""
        with pytest.raises(ValueError):
            PgLocationCreate(name="Lake View")

    def test_get_location_not_found(self, test_session):
        """Test getting non-existent PG location"""
        assert PgLocationService(test_session).get_location(999) is None

    def test_get_locations_ordered_by_name(self, test_session, test_data_factory):
        """Test locations are listed alphabetically with pagination"""
        test_data_factory.create_pg_location(test_session, name="Zen Stay")
        test_data_factory.create_pg_location(test_session, name="Amber Nest")
        test_data_factory.create_pg_location(test_session, name="Maple House")
        service = PgLocationService(test_session)

        assert [loc.name for loc in service.get_locations()] == ["Amber Nest", "Maple House", "Zen Stay"]
        assert [loc.name for loc in service.get_locations(skip=1, limit=1)] == ["Maple House"]

    def test_update_location_rent_cycle(self, test_session, test_data_factory):
        """Test switching the rent cycle of a location"""
        location = test_data_factory.create_pg_location(test_session)
        previous_updated_at = location.updated_at
        service = PgLocationService(test_session)

        result = service.update_location(
            location.id, PgLocationUpdate(rent_cycle_type=CyclePolicy.MIDMONTH))

        assert result.rent_cycle_type == CyclePolicy.MIDMONTH
        assert result.name == "Sunrise PG"
        assert result.updated_at >= previous_updated_at

    def test_update_location_not_found(self, test_session):
        """Test updating non-existent PG location"""
        result = PgLocationService(test_session).update_location(999, PgLocationUpdate(name="X"))

        assert result is None

    def test_update_location_rejects_null_fields(self):
        """Test name and rent cycle cannot be cleared"""
        with pytest.raises(ValueError, match="name cannot be null"):
            PgLocationUpdate(name=None)
        with pytest.raises(ValueError, match="rent_cycle_type cannot be null"):
            PgLocationUpdate(rent_cycle_type=None)

        assert PgLocationUpdate(address=None).address is None

    def test_delete_location_success(self, test_session, test_data_factory):
        """Test deleting a location without tenants"""
        location = test_data_factory.create_pg_location(test_session)
        service = PgLocationService(test_session)

        assert service.delete_location(location.id) is True
        assert test_session.get(PgLocation, location.id) is None

    def test_delete_location_with_tenants(self, test_session, test_data_factory):
        """Test a location with tenants cannot be deleted"""
        tenant = test_data_factory.create_tenant(test_session)
        service = PgLocationService(test_session)

        with pytest.raises(ValueError, match="still has 1 tenant"):
            service.delete_location(tenant.pg_location_id)

    def test_delete_location_not_found(self, test_session):
        """Test deleting non-existent PG location"""
        assert PgLocationService(test_session).delete_location(999) is False
