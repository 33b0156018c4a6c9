"""Tests for environment-driven Settings."""

from pathlib import Path

import pytest

from mealscan.config import DEFAULT_VISION_MODELS, Settings, load_settings


class TestSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env()

        assert settings.openai_api_key is None
        assert not settings.primary_enabled
        assert settings.vision_models == DEFAULT_VISION_MODELS
        assert settings.model_attempts == 2
        assert settings.image_max_width == 512
        assert settings.image_jpeg_quality == 70
        assert settings.secondary_providers_enabled

    def test_values_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_VISION_MODELS", "gpt-4o, gpt-4o-mini ,")
        monkeypatch.setenv("AI_REQUEST_TIMEOUT_S", "12.5")
        monkeypatch.setenv("SECONDARY_PROVIDERS_ENABLED", "no")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.primary_enabled
        assert settings.vision_models == ("gpt-4o", "gpt-4o-mini")
        assert settings.request_timeout_s == 12.5
        assert not settings.secondary_providers_enabled
        assert settings.log_level == "DEBUG"

    def test_invalid_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_REQUEST_TIMEOUT_S", "soon")
        monkeypatch.setenv("AI_MODEL_ATTEMPTS", "0")
        monkeypatch.setenv("IMAGE_JPEG_QUALITY", "150")

        settings = Settings.from_env()

        assert settings.request_timeout_s == 25.0
        assert settings.model_attempts == 1
        assert settings.image_jpeg_quality == 70

    def test_blank_key_is_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "   ")

        assert Settings.from_env().openai_api_key is None


def test_load_settings_reads_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "test.env"
    env_file.write_text("OPENAI_NUTRITION_MODEL=gpt-4o\n")
    # setenv first so teardown also removes the value loaded from the file
    monkeypatch.setenv("OPENAI_NUTRITION_MODEL", "placeholder")
    monkeypatch.delenv("OPENAI_NUTRITION_MODEL")

    settings = load_settings(env_file)

    assert settings.nutrition_model == "gpt-4o"
