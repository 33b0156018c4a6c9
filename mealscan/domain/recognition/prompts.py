"""Prompt templates for recognition and nutrition generation.

All prompts ask for a bare JSON object; the extractor still copes with
fenced or chatty answers.
"""

from typing import Optional

QUANTITY_DETECTION_PROMPT = """You are an expert food analyst. Look at this image and COUNT EXACTLY how many of each food item you see.

Instructions:
1. Count each visible food item carefully.
2. Give exact quantities (1, 2, 3, 4, ...). Do not estimate, count what you see.
3. If items are stacked or overlapping, count the visible portions.
4. Use specific food names (Margherita Pizza, Plain Paratha, Dal Makhani), not generic ones.

Return ONLY this JSON structure:
{
  "detectedItems": [
    {"foodName": "Margherita Pizza", "visibleCount": 2, "perUnitWeight": "150g", "totalWeight": "300g"},
    {"foodName": "French Fries", "visibleCount": 1, "perUnitWeight": "100g", "totalWeight": "100g"}
  ],
  "confidence": 0.9
}"""

USER_ASSISTED_PROMPT_TEMPLATE = """The user has provided this information about the food: "{hint}"

Use it to identify the food items, but COUNT the quantities you actually see in the image.
If the user says "3 parathas and dal" but you see 2 parathas, report 2.
If the user identifies the food but not the quantity, count what is visible.

Return ONLY this JSON structure:
{{
  "detectedItems": [
    {{"foodName": "User-identified food name", "visibleCount": 2, "perUnitWeight": "70g", "totalWeight": "140g"}}
  ],
  "confidence": 0.95
}}"""

NUTRITION_GENERATION_PROMPT_TEMPLATE = """You are a professional nutritionist database. Provide accurate nutrition information for this specific food item.

Food: {food_name}
Quantity: {quantity} piece(s)
Estimated weight per piece: {weight}

Return ONLY this JSON structure with realistic values for ONE piece:
{{
  "perUnitNutrition": {{
    "calories": 250, "protein": 12.5, "carbs": 30.2, "fat": 8.7, "fiber": 3.1,
    "sugar": 5.2, "sodium": 380, "iron": 1.8, "calcium": 85, "vitaminC": 2
  }},
  "standardWeight": "125g",
  "category": "Fast Food",
  "healthScore": 5,
  "ingredients": ["wheat flour", "cheese", "tomato sauce", "vegetables", "oil"],
  "tips": "High in sodium and calories - enjoy occasionally"
}}

Base the values on standard nutrition databases (USDA, Indian food composition tables),
typical preparation methods and realistic single-piece portions.
Units: grams for macros, milligrams for sodium, iron, calcium and vitaminC. No explanatory text."""

# Longest hint forwarded to the model; the rest is dropped.
MAX_HINT_LENGTH = 300


def build_recognition_prompt(user_hint: Optional[str] = None) -> str:
    """Quantity detection prompt, user-assisted when a hint is given."""
    hint = (user_hint or "").strip()
    if not hint:
        return QUANTITY_DETECTION_PROMPT
    hint = hint[:MAX_HINT_LENGTH].replace('"', "'")
    return USER_ASSISTED_PROMPT_TEMPLATE.format(hint=hint)


def build_nutrition_prompt(food_name: str, quantity: int, weight: str) -> str:
    return NUTRITION_GENERATION_PROMPT_TEMPLATE.format(
        food_name=food_name, quantity=quantity, weight=weight
    )
