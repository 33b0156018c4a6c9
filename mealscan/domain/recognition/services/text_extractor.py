"""Response text extractor - turns unreliable model output into DetectedItems.

Strategies, in order:

1. JSON: strip code fences, parse the text between the first "{" and the
   last "}", validate a detected-items array.
2. Regex: "<integer> <food word>" over a fixed vocabulary; counts outside
   1-20 are discarded.
3. Best guess: one item (count 1) for the vocabulary word that appears
   earliest in the text.

ParseError is raised only if all three strategies come up empty.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from mealscan.domain.errors import ParseError
from mealscan.domain.recognition.entities.detected_item import (
    MAX_VISIBLE_COUNT,
    MIN_VISIBLE_COUNT,
    DetectedItem,
)

logger = logging.getLogger(__name__)

FOOD_VOCABULARY: Tuple[str, ...] = (
    "pizza",
    "burger",
    "sandwich",
    "pasta",
    "noodles",
    "dosa",
    "idli",
    "vada",
    "paratha",
    "roti",
    "chapati",
    "bonda",
    "samosa",
    "poori",
    "puri",
)

_VOCAB_ALT = "|".join(FOOD_VOCABULARY)
_QUANTITY_PATTERN = re.compile(rf"\b(\d+)\s*({_VOCAB_ALT})(?:es|s)?\b", re.IGNORECASE)
_WORD_PATTERN = re.compile(rf"\b({_VOCAB_ALT})(?:es|s)?\b", re.IGNORECASE)
_FENCE_PATTERN = re.compile(r"```[a-zA-Z0-9_-]*\s*\n?(.*?)```", re.DOTALL)
_LEADING_INT = re.compile(r"^\s*(\d+)")


def strip_code_fences(text: str) -> str:
    """Return the body of the first fenced block, or the text unchanged."""
    match = _FENCE_PATTERN.search(text)
    if match:
        return match.group(1).strip()
    # Unterminated fence (output truncated after the opening marker)
    if text.lstrip().startswith("```"):
        return text.lstrip()[3:].split("\n", 1)[-1]
    return text


def extract_object(raw_text: str) -> Dict[str, Any]:
    """
    Parse the single JSON object embedded in model output.

    Raises:
        ParseError: NO_JSON_OBJECT, INVALID_JSON or ROOT_NOT_OBJECT
    """
    text = strip_code_fences(raw_text or "")
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or last <= first:
        raise ParseError("NO_JSON_OBJECT")
    snippet = text[first : last + 1]
    try:
        obj = json.loads(snippet)
    except json.JSONDecodeError as exc:
        raise ParseError("INVALID_JSON", str(exc)) from exc
    if not isinstance(obj, dict):
        raise ParseError("ROOT_NOT_OBJECT")
    return obj


def coerce_count(value: Any) -> int:
    """Coerce a provider count to an int within [1, 20]; invalid -> 1."""
    if isinstance(value, bool) or value is None:
        return MIN_VISIBLE_COUNT
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return MIN_VISIBLE_COUNT
        count = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return MIN_VISIBLE_COUNT
        count = int(match.group(1))
    else:
        return MIN_VISIBLE_COUNT
    if count < MIN_VISIBLE_COUNT:
        return MIN_VISIBLE_COUNT
    return min(count, MAX_VISIBLE_COUNT)


class _DetectedItemPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    food_name: str = Field(
        default="",
        validation_alias=AliasChoices("foodName", "food_name", "name", "label"),
    )
    visible_count: int = Field(
        default=MIN_VISIBLE_COUNT,
        validation_alias=AliasChoices("visibleCount", "visible_count", "count", "quantity"),
    )
    per_unit_weight: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("perUnitWeight", "per_unit_weight"),
    )

    @field_validator("food_name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return value.strip() if isinstance(value, str) else ""

    @field_validator("visible_count", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int:
        return coerce_count(value)

    @field_validator("per_unit_weight", mode="before")
    @classmethod
    def _weight(cls, value: Any) -> Optional[str]:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{int(value)}g"
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None


class _DetectionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    detected_items: List[Any] = Field(
        validation_alias=AliasChoices("detectedItems", "detected_items", "items"),
    )
    confidence: Optional[float] = None

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, value: Any) -> Optional[float]:
        try:
            conf = float(value)
        except (TypeError, ValueError):
            return None
        if conf != conf or not 0.0 <= conf <= 1.0:
            return None
        return conf


@dataclass(frozen=True)
class Detection:
    """Items plus optional model-reported confidence."""

    items: Tuple[DetectedItem, ...]
    confidence: Optional[float] = None
    strategy: str = "json"


class ResponseTextExtractor:
    """
    Extract detected food items from raw provider text.

    Example:
        >>> extractor = ResponseTextExtractor()
        >>> extractor.extract('```json\\n{"detectedItems":[{"foodName":"Chapati","visibleCount":2}]}\\n```')
        [DetectedItem(food_name='Chapati', visible_count=2, per_unit_weight_hint=None)]
    """

    def extract(self, raw_text: str) -> List[DetectedItem]:
        return list(self.extract_detection(raw_text).items)

    def extract_detection(self, raw_text: str) -> Detection:
        text = raw_text or ""

        detection = self._from_json(text)
        if detection is not None:
            return detection

        items = self._from_quantity_pattern(text)
        if items:
            logger.info("Items extracted from text pattern", extra={"items": len(items)})
            return Detection(items=tuple(items), strategy="regex")

        guess = self._best_guess(text)
        if guess is not None:
            logger.info("Single best-guess item", extra={"food_name": guess.food_name})
            return Detection(items=(guess,), strategy="best_guess")

        raise ParseError("NO_FOOD_FOUND", "no recognizable food in provider output")

    def _from_json(self, text: str) -> Optional[Detection]:
        try:
            obj = extract_object(text)
        except ParseError as exc:
            logger.debug("JSON extraction failed", extra={"code": exc.code})
            return None

        try:
            payload = _DetectionPayload.model_validate(obj)
        except ValidationError:
            logger.debug("JSON object has no detected items array")
            return None

        items: List[DetectedItem] = []
        for raw in payload.detected_items:
            if not isinstance(raw, dict):
                continue
            try:
                entry = _DetectedItemPayload.model_validate(raw)
            except ValidationError:
                continue
            if not entry.food_name:
                continue
            items.append(
                DetectedItem(
                    food_name=entry.food_name,
                    visible_count=entry.visible_count,
                    per_unit_weight_hint=entry.per_unit_weight,
                )
            )

        if not items:
            logger.debug("Detected items array had no usable entries")
            return None
        return Detection(items=tuple(items), confidence=payload.confidence, strategy="json")

    def _from_quantity_pattern(self, text: str) -> List[DetectedItem]:
        items: List[DetectedItem] = []
        seen = set()
        for match in _QUANTITY_PATTERN.finditer(text):
            count = int(match.group(1))
            if not MIN_VISIBLE_COUNT <= count <= MAX_VISIBLE_COUNT:
                continue
            word = match.group(2).lower()
            if word in seen:
                continue
            seen.add(word)
            items.append(DetectedItem(food_name=word.capitalize(), visible_count=count))
        return items

    def _best_guess(self, text: str) -> Optional[DetectedItem]:
        match = _WORD_PATTERN.search(text)
        if match is None:
            return None
        return DetectedItem(food_name=match.group(1).lower().capitalize(), visible_count=1)
