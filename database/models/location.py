

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Index
from sqlalchemy.orm import Mapped, mapped_column

from database.models.base import Base, utcnow


class Location(Base):
    __tablename__ = "locations"
    __table_args__ = (Index("ix_locations_driver_created", "driver_id", "created_date"),)

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    driver_id: Mapped[str]
    latitude: Mapped[float]
    longitude: Mapped[float]
    created_date: Mapped[datetime] = mapped_column(default=utcnow)
