

import asyncio
from typing import AsyncGenerator

from fastapi import WebSocket
from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from taskboard.config import Config
from taskboard.depends import LocationRepoScope
from taskboard.schemas import WebsocketMessage

from .payload import redis_to_websocket, websocket_to_redis

DISCONNECTED = object()


async def start_polling(websocket: WebSocket,
                        pubsub: PubSub,
                        redis: Redis,
                        repo_scope: LocationRepoScope
                        ) -> AsyncGenerator[WebsocketMessage, None]:

    queue = asyncio.Queue()

    async def consume_redis() -> None:
        try:
            async for item in redis_to_websocket(pubsub):
                if item is None:
                    await asyncio.sleep(Config.websocket_polling_interval / 10)
                    continue
                await queue.put(item)
        except Exception as e:
            await queue.put(e)

    async def consume_websocket() -> None:
        try:
            async for item in websocket_to_redis(websocket, pubsub, redis, repo_scope):
                if item is not None:
                    await queue.put(item)
        except Exception as e:
            await queue.put(e)
        else:
            await queue.put(DISCONNECTED)

    tasks = [asyncio.create_task(consume_redis()),
             asyncio.create_task(consume_websocket())]

    try:
        while True:
            item = await queue.get()
            if item is DISCONNECTED:
                break
            if isinstance(item, Exception):
                raise item
            yield item
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
