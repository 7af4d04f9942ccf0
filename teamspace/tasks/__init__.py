"""Background tasks scheduled by the Team service."""

from teamspace.tasks.base import BaseTask
from teamspace.tasks.delete_attachment import DeleteAttachmentProps, DeleteAttachmentTask
from teamspace.tasks.queue import TaskQueue, close_task_queue, get_task_queue

__all__ = [
    "BaseTask",
    "DeleteAttachmentProps",
    "DeleteAttachmentTask",
    "TaskQueue",
    "close_task_queue",
    "get_task_queue",
]
