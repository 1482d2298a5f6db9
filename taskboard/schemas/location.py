
from datetime import datetime
from uuid import UUID

from pydantic import Field

from database.models import Location

from .base import CamelSchema


class LocationCreateSchema(CamelSchema):
    driver_id: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class LocationSchema(CamelSchema):
    id: UUID
    driver_id: str
    latitude: float
    longitude: float
    created_date: datetime

    @classmethod
    def from_db(cls, location: Location) -> "LocationSchema":
        return cls(**location.__dict__)


class DriverSchema(CamelSchema):
    driver_id: str = Field(min_length=1)
