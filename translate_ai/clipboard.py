"""System clipboard access."""

import logging
from abc import ABC, abstractmethod

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when text could not be written to the clipboard."""


class Clipboard(ABC):
    """Write-only clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Place text on the clipboard.

        Raises:
            ClipboardError: If the write failed (no backend, permission denied).
        """
        ...


class SystemClipboard(Clipboard):
    """Clipboard backed by pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.warning("Clipboard write failed: %s", exc)
            raise ClipboardError(str(exc)) from exc
        logger.debug("Copied %d chars to clipboard", len(text))
