
import logging

from fastapi import (APIRouter, Depends, Query, WebSocket, WebSocketDisconnect,
                     status)
from redis.asyncio import Redis
from starlette.websockets import WebSocketState

from database.redis import get_redis_client
from database.repositories import LocationRepository
from taskboard.broker import publish_location_update
from taskboard.config import Config
from taskboard.depends import (LocationRepoScope, get_location_repo,
                               get_location_repo_scope)
from taskboard.schemas import (LocationCreateSchema, LocationSchema,
                               WebsocketMessage)
from taskboard.websocket.start_polling import start_polling

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/location", tags=["location"])


@router.websocket("/ws")
async def location_feed(websocket: WebSocket,
                        redis: Redis = Depends(get_redis_client),
                        repo_scope: LocationRepoScope = Depends(get_location_repo_scope)
                        ):
    await websocket.accept()
    pubsub = redis.pubsub()
    try:
        await websocket.send_text(WebsocketMessage(message_type="connection", data="Connected").model_dump_json())
        async for item in start_polling(websocket, pubsub, redis, repo_scope):
            await websocket.send_text(item.model_dump_json())
    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.exception("Location feed failed")
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.send_text(WebsocketMessage(message_type="error", data=str(e)).model_dump_json())
            await websocket.close()
    finally:
        await pubsub.aclose()


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_location(location_data: LocationCreateSchema,
                        redis: Redis = Depends(get_redis_client),
                        lr: LocationRepository = Depends(get_location_repo)
                        ) -> LocationSchema:
    location = await lr.create(location_data.driver_id,
                               location_data.latitude,
                               location_data.longitude)
    await publish_location_update(redis, lr, location_data.driver_id)
    return LocationSchema.from_db(location)


@router.get("/{driver_id}")
async def get_driver_locations(driver_id: str,
                               limit: int = Query(Config.location_history_limit, ge=1, le=Config.max_page_size),
                               lr: LocationRepository = Depends(get_location_repo)
                               ) -> list[LocationSchema]:
    return [LocationSchema.from_db(l) for l in await lr.get_latest(driver_id, limit)]
