

import json
import logging
from typing import AsyncGenerator

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from taskboard.broker import (publish_location_update, subscribe_driver,
                              unsubscribe_driver)
from taskboard.config import Config
from taskboard.depends import LocationRepoScope
from taskboard.exceptions import InvalidWebsocketMessageException
from taskboard.schemas import (DriverSchema, LocationCreateSchema,
                               WebsocketMessage)

logger = logging.getLogger(__name__)


def websocket_package(data, package_type: str) -> WebsocketMessage:
    return WebsocketMessage(message_type=package_type, data=data)


async def redis_to_websocket(pubsub: PubSub
                             ) -> AsyncGenerator[WebsocketMessage | None, None]:
    while True:
        if not pubsub.subscribed:
            yield None
            continue
        message = await pubsub.get_message(ignore_subscribe_messages=True,
                                           timeout=Config.websocket_polling_interval)
        if message is None or message["type"] != "message":
            yield None
            continue
        yield WebsocketMessage.model_validate_json(message["data"])


async def handle_client_message(message: WebsocketMessage,
                                pubsub: PubSub,
                                redis: Redis,
                                repo_scope: LocationRepoScope
                                ) -> WebsocketMessage | None:
    try:
        match message.message_type:
            case "subscribe":
                driver = DriverSchema.model_validate(message.data)
                await subscribe_driver(pubsub, driver.driver_id)
                return websocket_package(driver.driver_id, "subscribed")
            case "unsubscribe":
                driver = DriverSchema.model_validate(message.data)
                await unsubscribe_driver(pubsub, driver.driver_id)
                return websocket_package(driver.driver_id, "unsubscribed")
            case "send-location":
                data = LocationCreateSchema.model_validate(message.data)
                async with repo_scope() as lr:
                    await lr.create(data.driver_id, data.latitude, data.longitude)
                    await publish_location_update(redis, lr, data.driver_id)
                return None
            case _:
                raise InvalidWebsocketMessageException(
                    f"unknown message type '{message.message_type}'")
    except ValidationError as e:
        raise InvalidWebsocketMessageException(str(e))


async def websocket_to_redis(websocket: WebSocket,
                             pubsub: PubSub,
                             redis: Redis,
                             repo_scope: LocationRepoScope
                             ) -> AsyncGenerator[WebsocketMessage | None, None]:
    while True:
        try:
            raw = await websocket.receive_text()
        except WebSocketDisconnect:
            return
        try:
            message = WebsocketMessage.model_validate(json.loads(raw))
            reply = await handle_client_message(message, pubsub, redis, repo_scope)
        except InvalidWebsocketMessageException as e:
            logger.debug("Rejected websocket message: %s", e.detail)
            yield websocket_package(e.detail, "error")
            continue
        except ValueError as e:
            logger.debug("Rejected websocket frame: %s", e)
            yield websocket_package(f"Invalid message: {e}", "error")
            continue
        yield reply
