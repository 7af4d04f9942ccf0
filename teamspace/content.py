"""
Seed content for new workspaces.

Onboarding documents are markdown files named after their title, e.g.
``teamspace/onboarding/Getting Started.md``.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from teamspace.config.settings import get_settings
from teamspace.errors import NotFoundError

logger = logging.getLogger(__name__)


class ContentSource:
    """Reads the text of onboarding documents from a directory"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize content source

        Args:
            path: Directory holding the markdown files, defaults to
                settings.onboarding_path
        """
        self.path = Path(path) if path is not None else Path(get_settings().onboarding_path)

    async def read(self, title: str) -> str:
        """Read the markdown text of an onboarding document

        Args:
            title: Document title, used as the file name

        Returns:
            The document text

        Raises:
            NotFoundError: If no file exists for the title
        """
        file_path = self.path / f"{title}.md"
        try:
            return await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            logger.error(f"Onboarding document missing: {file_path}")
            raise NotFoundError(f"Onboarding document '{title}' not found") from e
