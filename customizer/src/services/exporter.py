"""
Clipboard export for the rendered pipeline document.
"""

import asyncio
import logging
from typing import Callable, Optional

import pyperclip

from customizer.src.config import get_settings

logger = logging.getLogger(__name__)

COPIED = "Copied!"
COPY_FAILED = "Copy failed"

class ClipboardExporter:
    """
    Copies text to the system clipboard and keeps a short-lived status.

    The status always clears `clear_after` seconds after an export, even if
    another export has started since; overlapping exports may flicker.
    """

    def __init__(
        self,
        writer: Optional[Callable[[str], None]] = None,
        clear_after: Optional[float] = None,
    ):
        self._writer = writer or pyperclip.copy
        if clear_after is None:
            clear_after = get_settings().copy_status_clear_seconds
        self.clear_after = clear_after
        self.status = ""

    async def export(self, document: str) -> str:
        try:
            await asyncio.to_thread(self._writer, document)
            self.status = COPIED
            logger.info(f"Copied {len(document)} characters to clipboard")
        except Exception as e:
            logger.warning(f"Copy failed: {e}")
            self.status = COPY_FAILED

        asyncio.get_running_loop().call_later(self.clear_after, self.clear_status)
        return self.status

    def clear_status(self):
        self.status = ""
