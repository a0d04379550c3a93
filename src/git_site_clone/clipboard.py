import logging
from typing import Protocol

import pyperclip

from .errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)


class ClipboardReader(Protocol):
    def read(self) -> str: ...


class PyperclipReader:
    def read(self) -> str:
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"cannot read clipboard: {e}") from e

        content = content.strip()
        if not content:
            raise ClipboardUnavailableError("clipboard is empty")

        logger.debug(f"clipboard: {content!r}")
        return content
