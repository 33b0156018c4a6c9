"""Unit tests for prompt builders."""

from mealscan.domain.recognition.prompts import (
    MAX_HINT_LENGTH,
    QUANTITY_DETECTION_PROMPT,
    build_nutrition_prompt,
    build_recognition_prompt,
)


class TestRecognitionPrompt:
    def test_no_hint_uses_detection_prompt(self) -> None:
        assert build_recognition_prompt() == QUANTITY_DETECTION_PROMPT
        assert build_recognition_prompt("   ") == QUANTITY_DETECTION_PROMPT

    def test_hint_is_embedded(self) -> None:
        prompt = build_recognition_prompt("2 aloo parathas with curd")

        assert "2 aloo parathas with curd" in prompt
        assert "detectedItems" in prompt

    def test_long_hint_is_truncated(self) -> None:
        prompt = build_recognition_prompt("x" * (MAX_HINT_LENGTH + 50))

        assert "x" * MAX_HINT_LENGTH in prompt
        assert "x" * (MAX_HINT_LENGTH + 1) not in prompt


class TestNutritionPrompt:
    def test_fields_are_filled(self) -> None:
        prompt = build_nutrition_prompt("Margherita Pizza", 2, "150g")

        assert "Margherita Pizza" in prompt
        assert "150g" in prompt
        assert "{food_name}" not in prompt
