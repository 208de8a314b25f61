"""Entry point: logging, composition, web UI launch."""

import logging
import time


def main() -> None:
    """Main entry point for the translation widget."""
    from translate_ai import config, languages
    from translate_ai.clipboard import SystemClipboard
    from translate_ai.controller import TranslationController
    from translate_ai.providers import load_provider
    from translate_ai.theme_store import FileThemeStore
    from translate_ai.ui import build_app, show_blocking_warning

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    logger = logging.getLogger(__name__)

    logger.info(
        "Translate-AI starting: provider=%s, settings=%s",
        config.TRANSLATION_PROVIDER,
        config.SETTINGS_PATH,
    )

    # Instantiate provider
    provider = load_provider(config.TRANSLATION_PROVIDER)

    controller = TranslationController(
        provider=provider,
        clipboard=SystemClipboard(),
        theme_store=FileThemeStore(config.SETTINGS_PATH),
        warn_fn=show_blocking_warning,
        from_language=languages.resolve(config.DEFAULT_FROM_LANGUAGE),
        to_language=languages.resolve(config.DEFAULT_TO_LANGUAGE),
        copy_feedback_seconds=config.COPY_FEEDBACK_SECONDS,
    )

    demo = build_app(controller)
    # Keep the server loop alive until the controller has closed on it
    demo.launch(
        server_name=config.SERVER_HOST,
        server_port=config.SERVER_PORT,
        prevent_thread_lock=True,
    )
    try:
        while True:
            time.sleep(0.5)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        try:
            controller.close()
        finally:
            demo.close()
            logger.info("Translate-AI stopped")


if __name__ == "__main__":
    main()
