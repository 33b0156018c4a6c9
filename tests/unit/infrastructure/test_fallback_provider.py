"""Unit tests for FallbackProvider."""

from mealscan.infrastructure.ai.fallback_provider import FallbackProvider


class TestFallbackProvider:
    def test_fixed_combo(self) -> None:
        result = FallbackProvider().result()

        assert [(i.food_name, i.visible_count, i.per_unit_weight_hint) for i in result.items] == [
            ("Plain Paratha", 2, "70g"),
            ("Aloo Bonda", 1, "45g"),
        ]
        assert result.provider == "Local Fallback"
        assert result.method == "Local Fallback"
        assert result.confidence == 0.6
        assert result.is_estimate is True
        assert result.allow_generation is False
        assert result.dish_name == "Indian Combo: 2 Plain Parathas + 1 Aloo Bonda"
        assert result.tips == "Estimated quantities - AI analysis failed"

    def test_result_is_deterministic(self) -> None:
        provider = FallbackProvider()

        assert provider.result() == provider.result()
