import os
from sqlalchemy import create_engine
from sqlmodel import Session, SQLModel


def _get_database_url_from_env_vars():
    DB_SCHEME = os.getenv("DB_SCHEME", "postgresql")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
    DB_HOST = os.getenv("DB_HOST", "db")
    DB_PORT = os.getenv("DB_PORT", "5432")
    DB_NAME = os.getenv("DB_NAME", "rentcycle")
    return f"{DB_SCHEME}://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"


def get_database_url():
    return os.getenv("DATABASE_URL", _get_database_url_from_env_vars())


def _sql_echo_enabled() -> bool:
    """SQL_ECHO wins when set; otherwise statements are echoed outside production."""
    flag = os.getenv("SQL_ECHO")
    if flag is not None:
        return flag.lower() in ("1", "true", "yes")
    return os.getenv("ENV") != "production"


DATABASE_URL = get_database_url()

engine = create_engine(
    DATABASE_URL,
    echo=_sql_echo_enabled(),
    # Connections to the managed Postgres are dropped when idle
    pool_pre_ping=True,
)


def create_db_and_tables(bind=None):
    """Create every registered table. Models must be imported beforehand."""
    SQLModel.metadata.create_all(bind or engine)


def get_db():
    with Session(engine) as session:
        yield session
