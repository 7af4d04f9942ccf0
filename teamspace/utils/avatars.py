"""Placeholder avatars for records without an uploaded image."""

import hashlib
from urllib.parse import quote
from uuid import UUID
from typing import Optional, Union

from teamspace.config.settings import get_settings


def generate_avatar_url(id: Union[UUID, str], name: Optional[str] = None) -> str:
    """Build a deterministic placeholder avatar URL from an id and a name.

    The same (id, name) pair always yields the same URL.
    """
    settings = get_settings()

    hashed_id = hashlib.sha256(str(id).encode("utf-8")).hexdigest()
    initial = (name or "Unknown")[0].upper()

    return f"{settings.default_avatar_host.rstrip('/')}/avatar/{hashed_id}/{quote(initial)}.png"
