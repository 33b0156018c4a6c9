"""Nutrition resolver - maps provider food names to catalog entries.

Matching runs as three explicit passes, first hit wins:

1. exact: normalized name equals a catalog key or display name
2. compound: spaces/underscores swapped ("dal makhani" <-> "dal_makhani")
3. partial: a catalog key longer than 3 characters occurs inside the name

Pass 3 is a known heuristic weakness: an early, generic key (e.g.
"paratha") wins over later, more specific ones ("lachha paratha" resolves
to Plain Paratha). It is kept for compatibility with existing reports.

Names that match nothing produce a GenerationStub; resolution gaps are
never errors.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..catalog import LocalNutritionCatalog, default_catalog, normalize_key
from ..entities.catalog_entry import DEFAULT_WEIGHT_GRAMS, CatalogEntry

logger = logging.getLogger(__name__)

PARTIAL_MATCH_MIN_KEY_LENGTH = 3

# Ordered keyword -> grams table. Fast food first (most specific), then
# breads, rice, curries, snacks, condiments and sweets.
WEIGHT_KEYWORDS: Tuple[Tuple[str, int], ...] = (
    ("pizza", 150),
    ("burger", 180),
    ("sandwich", 120),
    ("pasta", 200),
    ("noodles", 150),
    ("fries", 100),
    ("dosa", 100),
    ("idli", 40),
    ("vada", 50),
    ("naan", 80),
    ("kulcha", 100),
    ("paratha", 70),
    ("parantha", 70),
    ("roti", 55),
    ("chapati", 50),
    ("poori", 35),
    ("puri", 35),
    ("biryani", 250),
    ("pulao", 180),
    ("rice", 150),
    ("dal", 150),
    ("curry", 150),
    ("masala", 150),
    ("paneer", 170),
    ("samosa", 60),
    ("bonda", 45),
    ("pakora", 50),
    ("chutney", 50),
    ("pickle", 15),
    ("raita", 100),
    ("cake", 80),
    ("cookie", 15),
    ("ladoo", 40),
    ("jamun", 60),
)


def estimate_weight(food_name: str) -> int:
    """Estimate a plausible per-unit weight in grams from keywords."""
    name = food_name.lower()
    for keyword, grams in WEIGHT_KEYWORDS:
        if keyword in name:
            return grams
    return DEFAULT_WEIGHT_GRAMS


@dataclass(frozen=True)
class GenerationStub:
    """Unresolved food: needs AI generation or the category fallback."""

    display_name: str
    estimated_weight_grams: int

    @property
    def needs_generation(self) -> bool:
        return True


Resolution = Union[CatalogEntry, GenerationStub]


class NutritionResolver:
    """Resolve food names against the local catalog."""

    def __init__(self, catalog: Optional[LocalNutritionCatalog] = None):
        self._catalog = catalog or default_catalog()
        self._passes: List[Tuple[str, Callable[[str], Optional[CatalogEntry]]]] = [
            ("exact", self._match_exact),
            ("compound", self._match_compound),
            ("partial", self._match_partial),
        ]

    @property
    def catalog(self) -> LocalNutritionCatalog:
        return self._catalog

    def resolve(self, food_name: str) -> Resolution:
        name = normalize_key(food_name or "")
        if name:
            for pass_name, matcher in self._passes:
                entry = matcher(name)
                if entry is not None:
                    logger.debug(
                        "Catalog match",
                        extra={"food_name": food_name, "key": entry.key, "pass": pass_name},
                    )
                    return entry

        logger.debug("No catalog match, generation required", extra={"food_name": food_name})
        return GenerationStub(
            display_name=food_name,
            estimated_weight_grams=estimate_weight(food_name or ""),
        )

    def _match_exact(self, name: str) -> Optional[CatalogEntry]:
        return self._catalog.get(name) or self._catalog.by_display_name(name)

    def _match_compound(self, name: str) -> Optional[CatalogEntry]:
        entry = self._catalog.get(name.replace(" ", "_"))
        if entry is not None:
            return entry
        for key, candidate in self._catalog.items():
            if key.replace("_", " ") == name:
                return candidate
        return None

    def _match_partial(self, name: str) -> Optional[CatalogEntry]:
        for key, entry in self._catalog.items():
            if len(key) <= PARTIAL_MATCH_MIN_KEY_LENGTH:
                continue
            if key in name or key.replace("_", " ") in name:
                return entry
        return None

