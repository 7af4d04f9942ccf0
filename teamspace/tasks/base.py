"""Base class for background tasks."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional

from teamspace.tasks.queue import TaskQueue, get_task_queue

logger = logging.getLogger(__name__)


class BaseTask:
    """
    A unit of work run by the worker process.

    Only scheduling lives in this service. Subclasses name the task; the
    props must be JSON serializable.
    """

    name: ClassVar[str]

    @classmethod
    def serialize(cls, props: Dict[str, Any]) -> str:
        return json.dumps(
            {
                "task": cls.name,
                "props": props,
                "scheduled_at": datetime.now(timezone.utc).isoformat(),
            }
        )

    @classmethod
    async def schedule(cls, props: Dict[str, Any], queue: Optional[TaskQueue] = None) -> bool:
        """Enqueue the task.

        Args:
            props: Arguments for the task
            queue: Queue to push to, defaults to the global task queue

        Returns:
            True once the queue accepted the task
        """
        queue = queue or await get_task_queue()
        length = await queue.push(cls.serialize(props))
        logger.info(f"Scheduled {cls.name} ({length} tasks queued)")
        return length > 0
