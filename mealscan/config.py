"""Runtime configuration for mealscan.

Values are read from the process environment. A `.env` file in the
working directory (or the path given to `load_settings`) is loaded first
without overriding variables that are already set.

Example .env:
    OPENAI_API_KEY=sk-...
    OPENAI_VISION_MODELS=gpt-4o-mini,gpt-4o
    LOG_LEVEL=DEBUG
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_VISION_MODELS = ("gpt-4o-mini", "gpt-4o")
DEFAULT_HUGGINGFACE_URL = (
    "https://api-inference.huggingface.co/models/google/vit-base-patch16-224"
)
DEFAULT_GOOGLE_VISION_URL = "https://vision.googleapis.com/v1/images:annotate"
DEFAULT_OPENFOODFACTS_URL = "https://world.openfoodfacts.org/api/v2/product"


def _env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "Invalid float in environment, using default",
            extra={"variable": name, "value": raw, "default": default},
        )
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            "Invalid integer in environment, using default",
            extra={"variable": name, "value": raw, "default": default},
        )
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Read-only configuration shared by every request."""

    openai_api_key: Optional[str] = None
    vision_models: Tuple[str, ...] = DEFAULT_VISION_MODELS
    nutrition_model: str = "gpt-4o-mini"
    request_timeout_s: float = 25.0
    max_output_tokens: int = 1024
    temperature: float = 0.1

    retry_max_attempts: int = 3
    retry_base_delay_s: float = 0.5
    retry_max_delay_s: float = 8.0
    model_attempts: int = 2
    model_switch_delay_s: float = 1.0

    secondary_providers_enabled: bool = True
    huggingface_api_key: Optional[str] = None
    huggingface_url: str = DEFAULT_HUGGINGFACE_URL
    google_vision_api_key: Optional[str] = None
    google_vision_url: str = DEFAULT_GOOGLE_VISION_URL

    openfoodfacts_url: str = DEFAULT_OPENFOODFACTS_URL
    openfoodfacts_timeout_s: float = 8.0

    image_max_width: int = 512
    image_jpeg_quality: int = 70

    log_level: str = "INFO"

    @property
    def primary_enabled(self) -> bool:
        return bool(self.openai_api_key) and bool(self.vision_models)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        models_raw = _env_str("OPENAI_VISION_MODELS")
        if models_raw:
            models = tuple(m.strip() for m in models_raw.split(",") if m.strip())
        else:
            models = DEFAULT_VISION_MODELS

        quality = _env_int("IMAGE_JPEG_QUALITY", 70)
        if not 1 <= quality <= 95:
            logger.warning(
                "IMAGE_JPEG_QUALITY out of range, using default",
                extra={"value": quality},
            )
            quality = 70

        return cls(
            openai_api_key=_env_str("OPENAI_API_KEY"),
            vision_models=models,
            nutrition_model=_env_str("OPENAI_NUTRITION_MODEL") or "gpt-4o-mini",
            request_timeout_s=_env_float("AI_REQUEST_TIMEOUT_S", 25.0),
            max_output_tokens=_env_int("AI_MAX_OUTPUT_TOKENS", 1024),
            temperature=_env_float("AI_TEMPERATURE", 0.1),
            retry_max_attempts=max(1, _env_int("AI_RETRY_MAX_ATTEMPTS", 3)),
            retry_base_delay_s=_env_float("AI_RETRY_BASE_DELAY_S", 0.5),
            model_attempts=max(1, _env_int("AI_MODEL_ATTEMPTS", 2)),
            model_switch_delay_s=_env_float("AI_MODEL_SWITCH_DELAY_S", 1.0),
            secondary_providers_enabled=_env_bool("SECONDARY_PROVIDERS_ENABLED", True),
            huggingface_api_key=_env_str("HUGGINGFACE_API_KEY"),
            huggingface_url=_env_str("HUGGINGFACE_MODEL_URL") or DEFAULT_HUGGINGFACE_URL,
            google_vision_api_key=_env_str("GOOGLE_VISION_API_KEY"),
            openfoodfacts_url=_env_str("OPENFOODFACTS_BASE_URL") or DEFAULT_OPENFOODFACTS_URL,
            openfoodfacts_timeout_s=_env_float("OPENFOODFACTS_TIMEOUT_S", 8.0),
            image_max_width=max(16, _env_int("IMAGE_MAX_WIDTH", 512)),
            image_jpeg_quality=quality,
            log_level=(_env_str("LOG_LEVEL") or "INFO").upper(),
        )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load `.env` (if present) and return settings from the environment."""
    path = Path(env_file) if env_file else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)
        logger.debug("Loaded environment file", extra={"path": str(path)})
    return Settings.from_env()
