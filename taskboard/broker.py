
import logging

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from database.redis import RedisType
from database.repositories import LocationRepository
from taskboard.config import Config
from taskboard.schemas import LocationSchema, WebsocketMessage

logger = logging.getLogger(__name__)


def location_channel(driver_id: str) -> str:
    return f"{RedisType.location_update.value}:{driver_id}"


def location_message_type(driver_id: str) -> str:
    return f"location-update-{driver_id}"


async def publish_location_update(redis: Redis,
                                  lr: LocationRepository,
                                  driver_id: str
                                  ) -> int:
    locations = await lr.get_latest(driver_id, Config.location_history_limit)
    message = WebsocketMessage(
        message_type=location_message_type(driver_id),
        data=[LocationSchema.from_db(location).model_dump(mode="json", by_alias=True)
              for location in locations])
    receivers = await redis.publish(location_channel(driver_id), message.model_dump_json())
    logger.debug("Published %d locations of driver %s to %s subscribers",
                 len(locations), driver_id, receivers)
    return receivers


async def subscribe_driver(pubsub: PubSub, driver_id: str) -> None:
    await pubsub.subscribe(location_channel(driver_id))


async def unsubscribe_driver(pubsub: PubSub, driver_id: str) -> None:
    await pubsub.unsubscribe(location_channel(driver_id))
