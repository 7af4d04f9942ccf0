"""Extract attachment ids from URLs and text that reference them."""

import re
from typing import List

_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

attachment_redirect_regex = re.compile(rf"/api/attachments\.redirect\?id=(?P<id>{_UUID})", re.IGNORECASE)
attachment_public_regex = re.compile(rf"public/{_UUID}/(?P<id>{_UUID})", re.IGNORECASE)


def parse_attachment_ids(text: str, include_public: bool = False) -> List[str]:
    """
    Find the ids of attachments referenced in text.

    Args:
        text: A URL or a document body
        include_public: Also match public bucket keys ("public/<team>/<id>/...")

    Returns:
        Unique attachment ids in order of first appearance
    """
    if not text:
        return []

    matches = list(attachment_redirect_regex.finditer(text))
    if include_public:
        matches.extend(attachment_public_regex.finditer(text))

    return list(dict.fromkeys(match.group("id").lower() for match in matches))
