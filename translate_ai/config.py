"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Provider
TRANSLATION_PROVIDER: str = os.environ.get("TRANSLATION_PROVIDER", "mistral")

# Mistral
MISTRAL_API_KEY: str = os.environ.get("MISTRAL_API_KEY", "")
MISTRAL_ENDPOINT: str = os.environ.get("MISTRAL_ENDPOINT", "https://api.mistral.ai")
MISTRAL_MODEL: str = os.environ.get("MISTRAL_MODEL", "mistral-large-latest")
MISTRAL_TEMPERATURE: float = float(os.environ.get("MISTRAL_TEMPERATURE", "0"))
MISTRAL_TIMEOUT_SECONDS: float = float(os.environ.get("MISTRAL_TIMEOUT_SECONDS", "30"))

# Initial language selection (names are resolved against the registry)
DEFAULT_FROM_LANGUAGE: str = os.environ.get("DEFAULT_FROM_LANGUAGE", "English")
DEFAULT_TO_LANGUAGE: str = os.environ.get("DEFAULT_TO_LANGUAGE", "Italian")

# Copy feedback
COPY_FEEDBACK_SECONDS: float = float(os.environ.get("COPY_FEEDBACK_SECONDS", "2"))

# Theme preference file
SETTINGS_PATH: Path = Path(
    os.environ.get(
        "SETTINGS_PATH",
        str(Path.home() / ".translate_ai" / "settings.json"),
    )
).expanduser()

# Web UI
SERVER_HOST: str = os.environ.get("SERVER_HOST", "127.0.0.1")
SERVER_PORT: int = int(os.environ.get("SERVER_PORT", "7860"))

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
