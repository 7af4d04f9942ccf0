"""Redis Client for the background task queue

Scheduled tasks are pushed as JSON onto a Redis list that the worker
process consumes.
"""

import logging
from typing import Optional

import redis.asyncio as redis

from teamspace.config.settings import get_settings

logger = logging.getLogger(__name__)


class TaskQueue:
    """Async Redis client wrapper for the task list"""

    def __init__(self, url: Optional[str] = None, key: Optional[str] = None):
        """Initialize task queue

        Args:
            url: Redis URL, defaults to settings.redis_url
            key: Name of the Redis list, defaults to settings.task_queue_key
        """
        settings = get_settings()
        self.url = url or settings.redis_url
        self.key = key or settings.task_queue_key
        self._client: Optional[redis.Redis] = None

    async def connect(self):
        """Establish Redis connection"""
        if not self._client:
            self._client = redis.Redis.from_url(self.url, decode_responses=True)
            logger.info(f"Connected to task queue: {self.key}")

    async def disconnect(self):
        """Close Redis connection"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from task queue")

    def get_client(self) -> redis.Redis:
        """Get the underlying Redis client

        Raises:
            RuntimeError: If client not connected
        """
        if not self._client:
            raise RuntimeError("Task queue not connected. Call connect() first.")
        return self._client

    async def push(self, payload: str) -> int:
        """Append a serialized task to the queue

        Returns:
            Length of the queue after the push
        """
        return await self.get_client().rpush(self.key, payload)

    async def health_check(self) -> bool:
        """Check Redis connection health

        Returns:
            True if Redis is responsive, False otherwise
        """
        try:
            if not self._client:
                return False
            await self._client.ping()
            return True
        except Exception as e:
            logger.error(f"Task queue health check failed: {e}")
            return False


# Global task queue instance
_task_queue: Optional[TaskQueue] = None


async def get_task_queue() -> TaskQueue:
    """Get or create the global task queue (connected)"""
    global _task_queue
    if not _task_queue:
        _task_queue = TaskQueue()
        await _task_queue.connect()
    return _task_queue


async def close_task_queue():
    """Close the global task queue"""
    global _task_queue
    if _task_queue:
        await _task_queue.disconnect()
        _task_queue = None
