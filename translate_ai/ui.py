"""Gradio page bound to a TranslationController."""

import asyncio

import gradio as gr

from translate_ai.controller import TranslationController
from translate_ai.languages import LANGUAGES

TITLE = "Translate-AI"
INPUT_PLACEHOLDER = "Enter your text here"
OUTPUT_PLACEHOLDER = "Translation will appear here..."
TRANSLATE_LABEL = "Translate"
TRANSLATING_LABEL = "Translating..."

# Runs in the browser: sync the document-level dark class with the flag
APPLY_THEME_JS = """
(dark) => {
    document.body.classList.toggle('dark', dark);
    return [];
}
"""


def show_blocking_warning(message: str) -> None:
    """Warning callback for the controller: gradio shows gr.Error as a modal."""
    raise gr.Error(message)


class PageHandlers:
    """Event handlers for the page. Each forwards to the controller and
    re-renders from ``controller.state``."""

    def __init__(self, controller: TranslationController) -> None:
        self.controller = controller

    def on_input(self, text: str) -> str:
        self.controller.set_input(text)
        return self.controller.state.translated_text

    async def on_translate(self, text: str, source: str, target: str):
        """Yields (output, button) updates: disabled while the request is in flight."""
        controller = self.controller
        controller.set_input(text)
        controller.set_from_language(source)
        controller.set_to_language(target)

        if not controller.state.input:
            # Emits the warning; leaves the page as it is
            await controller.translate()
            yield gr.update(), gr.update()
            return

        yield gr.update(), gr.update(interactive=False, value=TRANSLATING_LABEL)
        await controller.translate()
        yield (
            controller.state.translated_text,
            gr.update(interactive=controller.translate_enabled, value=TRANSLATE_LABEL),
        )

    async def on_copy(self):
        """Yields the copy message, then its cleared value once the timer fires."""
        clear_task = await self.controller.copy()
        yield self.controller.state.copy_success
        if clear_task is not None:
            # wait() leaves the clear running if this handler is cancelled
            await asyncio.wait({clear_task})
            yield self.controller.state.copy_success

    def on_toggle_theme(self) -> bool:
        return self.controller.toggle_theme()

    def on_load(self) -> bool:
        return self.controller.state.dark_mode


def build_app(controller: TranslationController) -> gr.Blocks:
    """Build the widget page."""
    state = controller.state
    handlers = PageHandlers(controller)

    with gr.Blocks(title=TITLE) as demo:
        gr.Markdown(f"# {TITLE}")
        dark_mode = gr.Checkbox(value=state.dark_mode, visible=False)

        with gr.Row():
            from_language = gr.Dropdown(
                choices=LANGUAGES, value=state.from_language, label="From:"
            )
            to_language = gr.Dropdown(
                choices=LANGUAGES, value=state.to_language, label="To:"
            )

        with gr.Row():
            input_box = gr.Textbox(
                value=state.input,
                placeholder=INPUT_PLACEHOLDER,
                show_label=False,
                scale=4,
            )
            translate_button = gr.Button(TRANSLATE_LABEL, variant="primary", scale=1)

        output_box = gr.Textbox(
            value=state.translated_text,
            placeholder=OUTPUT_PLACEHOLDER,
            label="Translation",
            interactive=False,
            lines=4,
        )

        with gr.Row():
            copy_button = gr.Button("Copy")
            copy_feedback = gr.Markdown(state.copy_success)
            theme_button = gr.Button("Toggle theme")

        from_language.change(controller.set_from_language, inputs=from_language)
        to_language.change(controller.set_to_language, inputs=to_language)
        input_box.input(handlers.on_input, inputs=input_box, outputs=output_box)
        translate_button.click(
            handlers.on_translate,
            inputs=[input_box, from_language, to_language],
            outputs=[output_box, translate_button],
            concurrency_limit=1,
        )
        copy_button.click(handlers.on_copy, outputs=copy_feedback, concurrency_limit=None)
        theme_button.click(handlers.on_toggle_theme, outputs=dark_mode).then(
            None, inputs=dark_mode, js=APPLY_THEME_JS
        )
        demo.load(handlers.on_load, outputs=dark_mode).then(
            None, inputs=dark_mode, js=APPLY_THEME_JS
        )

    return demo
