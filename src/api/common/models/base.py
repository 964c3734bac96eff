from datetime import datetime
from sqlmodel import Field, SQLModel, DateTime
from sqlalchemy.orm import declared_attr
from src.api.common.utils.datetime import get_current_datetime


class TimestampMixin:
    """Mixin to add created_at and updated_at fields to tables"""
    created_at: datetime = Field(
        default_factory=get_current_datetime,
        sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime = Field(
        default_factory=get_current_datetime,
        sa_type=DateTime(timezone=True), nullable=False)

    def touch(self) -> None:
        """Refresh updated_at before persisting a change."""
        self.updated_at = get_current_datetime()


class BaseModel(SQLModel):
    """Base model for every table in the application, named after its class"""
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()
