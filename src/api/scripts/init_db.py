from src.api.pg_locations.models.pg_location import PgLocation
from src.api.tenants.models.tenant import Tenant
from src.api.tenants.models.tenant_payment import TenantPayment
from src.api.common.utils.database import create_db_and_tables, get_database_url
from fastapi.logger import logger

# Models are imported above to register them with SQLModel


def init_db():
    """Initialize the database by creating all tables"""
    logger.info(f"Creating database tables on {get_database_url().rsplit('@', 1)[-1]}...")
    create_db_and_tables()
    logger.info("Database tables created successfully.")


if __name__ == "__main__":
    init_db()
