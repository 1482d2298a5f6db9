
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Location


class LocationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, driver_id: str, latitude: float, longitude: float) -> Location:
        location = Location(driver_id=driver_id,
                            latitude=latitude,
                            longitude=longitude)
        self.session.add(location)
        await self.session.commit()
        return location

    async def get_latest(self, driver_id: str, limit: int) -> list[Location]:
        stmt = select(Location) \
            .where(Location.driver_id == driver_id) \
            .order_by(Location.created_date.desc()) \
            .limit(limit)
        return list(await self.session.scalars(stmt))
