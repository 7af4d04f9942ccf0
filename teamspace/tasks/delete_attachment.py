"""Deletes an attachment record and its stored file."""

from typing import TypedDict

from teamspace.tasks.base import BaseTask


class DeleteAttachmentProps(TypedDict):
    attachmentId: str


class DeleteAttachmentTask(BaseTask):
    name = "DeleteAttachmentTask"
