"""UI state controller for the translation widget.

Owns the page state and exposes named transitions for every user action
(edit input, pick languages, translate, copy, toggle theme). The view layer
only reads ``state`` and calls these methods.

Key design: nothing here is cancellable. A translate call that never resolves
leaves ``is_loading`` set, and copy-feedback clears are independent timers
(last write wins, a stale clear may wipe a newer message).
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from translate_ai import languages
from translate_ai.clipboard import Clipboard
from translate_ai.prompt import build_prompt
from translate_ai.providers.base import ModelProvider
from translate_ai.theme_store import ThemeStore

logger = logging.getLogger(__name__)

EMPTY_INPUT_WARNING = "Please enter some text to translate."
NOT_AVAILABLE_TEXT = "Translation not available."
ERROR_TEXT = "Error occurred during translation."
COPY_OK_TEXT = "Copied!"
COPY_FAILED_TEXT = "Failed to copy"
COPY_FEEDBACK_SECONDS = 2.0


class TranslationStatus(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class TranslationRequest:
    """Snapshot of the inputs at the moment Translate was invoked."""

    source_language: str
    target_language: str
    text: str


@dataclass(frozen=True)
class TranslationResult:
    text: str
    status: TranslationStatus


@dataclass
class UIState:
    """Everything the page renders."""

    input: str = ""
    translated_text: str = ""
    from_language: str = "English"
    to_language: str = "Italian"
    is_loading: bool = False
    dark_mode: bool = False
    copy_success: str = ""


# Type alias for the view warning callback
WarnCallback = Callable[[str], None]


def _log_warning(message: str) -> None:
    logger.warning("[controller] %s", message)


class TranslationController:
    """Drives the translate / copy / theme actions over a single UIState.

    Args:
        provider: Model provider used for translation.
        clipboard: Clipboard the copy action writes to.
        theme_store: Durable store for the theme preference.
        warn_fn: Shows a blocking warning to the user. Defaults to logging it.
        from_language: Initial source language (registry name).
        to_language: Initial target language (registry name).
        copy_feedback_seconds: Delay before the copy message is cleared.
    """

    def __init__(
        self,
        provider: ModelProvider,
        clipboard: Clipboard,
        theme_store: ThemeStore,
        warn_fn: WarnCallback | None = None,
        from_language: str = "English",
        to_language: str = "Italian",
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        self.provider = provider
        self.clipboard = clipboard
        self.theme_store = theme_store
        self.warn_fn = warn_fn or _log_warning
        self.copy_feedback_seconds = copy_feedback_seconds

        self.state = UIState(dark_mode=theme_store.load() == "dark")
        self.set_from_language(from_language)
        self.set_to_language(to_language)

        self.last_result: TranslationResult | None = None
        # Track fire-and-forget timer tasks
        self._active_tasks: set[asyncio.Task] = set()
        # Loop that owns the timers and the provider connections
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def translate_enabled(self) -> bool:
        """Whether the view should offer the Translate action."""
        return not self.state.is_loading

    def _fire_task(self, coro) -> asyncio.Task:
        """Create a tracked fire-and-forget task."""
        self._loop = asyncio.get_running_loop()
        task = asyncio.create_task(coro)
        self._active_tasks.add(task)
        task.add_done_callback(self._active_tasks.discard)
        return task

    # --- Edits ---

    def set_input(self, text: str) -> None:
        """Update the input. Clearing it also clears the output, even mid-request."""
        self.state.input = text
        if not text:
            self.state.translated_text = ""

    def set_from_language(self, name: str) -> None:
        if not languages.is_supported(name):
            raise ValueError(f"Unsupported source language '{name}'")
        self.state.from_language = name

    def set_to_language(self, name: str) -> None:
        if not languages.is_supported(name):
            raise ValueError(f"Unsupported target language '{name}'")
        self.state.to_language = name

    # --- Translate ---

    async def translate(self) -> TranslationResult | None:
        """Run one translate request against the provider.

        Empty input only emits the warning and leaves the state untouched.
        Otherwise the provider is awaited exactly once and the outcome lands
        in ``state.translated_text``. Provider errors never propagate.

        Returns:
            The result, or None if the request was rejected for empty input.
        """
        if not self.state.input:
            self.warn_fn(EMPTY_INPUT_WARNING)
            return None

        request = TranslationRequest(
            source_language=self.state.from_language,
            target_language=self.state.to_language,
            text=self.state.input,
        )
        self._loop = asyncio.get_running_loop()
        self.state.is_loading = True
        self.last_result = TranslationResult(text="", status=TranslationStatus.PENDING)
        logger.debug(
            "[controller] action=SUBMIT from=%s to=%s chars=%d",
            request.source_language,
            request.target_language,
            len(request.text),
        )

        try:
            result = await self._run_request(request)
        finally:
            self.state.is_loading = False

        self.state.translated_text = result.text
        self.last_result = result
        logger.debug("[controller] action=DONE status=%s", result.status.value)
        return result

    async def _run_request(self, request: TranslationRequest) -> TranslationResult:
        prompt = build_prompt(
            request.source_language, request.target_language, request.text
        )
        try:
            response = await self.provider.invoke(prompt)
        except Exception:
            logger.exception(
                "[controller] translation error from=%s to=%s",
                request.source_language,
                request.target_language,
            )
            return TranslationResult(text=ERROR_TEXT, status=TranslationStatus.FAILED)

        # Any falsy content, including a genuine empty translation, is unusable
        if response.content:
            return TranslationResult(
                text=response.content, status=TranslationStatus.SUCCESS
            )
        return TranslationResult(text=NOT_AVAILABLE_TEXT, status=TranslationStatus.EMPTY)

    # --- Copy ---

    async def copy(self) -> asyncio.Task | None:
        """Copy the current translation to the clipboard.

        Sets ``copy_success`` to the outcome message and schedules its clear.

        Returns:
            The pending clear task, or None if there was nothing to copy.
        """
        text = self.state.translated_text
        if not text:
            return None

        try:
            self.clipboard.copy(text)
            self.state.copy_success = COPY_OK_TEXT
        except Exception:
            logger.exception("[controller] copy to clipboard failed")
            self.state.copy_success = COPY_FAILED_TEXT

        return self._fire_task(self._clear_copy_feedback())

    async def _clear_copy_feedback(self) -> None:
        """Blank the copy message after the feedback delay, whatever it says by then."""
        try:
            await asyncio.sleep(self.copy_feedback_seconds)
        except asyncio.CancelledError:
            return  # Controller shutting down
        self.state.copy_success = ""

    # --- Theme ---

    def toggle_theme(self) -> bool:
        """Flip dark mode and persist it. Returns the new value for the view to apply."""
        self.state.dark_mode = not self.state.dark_mode
        self.theme_store.save("dark" if self.state.dark_mode else "light")
        logger.debug("[controller] action=THEME dark_mode=%s", self.state.dark_mode)
        return self.state.dark_mode

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Cancel pending timers and release the provider.

        Timers belonging to another event loop cannot be awaited here and are
        dropped. The provider is closed regardless.
        """
        try:
            current = asyncio.get_running_loop()
            pending = [t for t in self._active_tasks if t.get_loop() is current]
            dropped = len(self._active_tasks) - len(pending)
            if dropped:
                logger.debug("[controller] dropping %d timers from another loop", dropped)
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            self._active_tasks.clear()
        finally:
            await self.provider.close()

    def close(self, timeout: float = 5.0) -> None:
        """Run aclose() on the loop that owns the controller's work.

        For synchronous shutdown code outside that loop's thread, e.g. after
        the web server's loop has served requests. If the owning loop is no
        longer running, a fresh loop is used.
        """
        loop = self._loop
        if loop is not None and loop.is_running() and not loop.is_closed():
            asyncio.run_coroutine_threadsafe(self.aclose(), loop).result(timeout)
        else:
            asyncio.run(self.aclose())
