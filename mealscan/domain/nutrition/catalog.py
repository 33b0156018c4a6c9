"""Local nutrition catalog - immutable, ordered, built once per process."""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .catalog_data import CATALOG_DATA
from .entities.catalog_entry import CatalogEntry, parse_weight
from .entities.nutrition_vector import NutritionVector

logger = logging.getLogger(__name__)


def normalize_key(value: str) -> str:
    """Lowercase, trim and collapse inner whitespace."""
    return " ".join(value.lower().split())


def _build_entry(key: str, record: Mapping[str, Any]) -> CatalogEntry:
    return CatalogEntry(
        key=normalize_key(key),
        display_name=record["display_name"],
        weight_grams=parse_weight(record.get("weight")),
        per_unit_nutrition=NutritionVector.from_mapping(record["nutrition"]),
        category=record.get("category", "Food Item"),
        health_score=float(record.get("health_score", 6)),
        ingredients=tuple(record.get("ingredients", ())),
        tips=record.get("tips", ""),
    )


class LocalNutritionCatalog:
    """
    Read-only mapping of normalized key -> CatalogEntry.

    Iteration order is the insertion order of the source data. The
    underlying dict is wrapped in a MappingProxyType and entries are frozen,
    so the catalog can be shared between concurrent requests without locks.

    Example:
        >>> catalog = LocalNutritionCatalog.from_records(CATALOG_DATA)
        >>> catalog.get("paratha").display_name
        'Plain Paratha'
    """

    def __init__(self, entries: Mapping[str, CatalogEntry]):
        self._entries: Mapping[str, CatalogEntry] = MappingProxyType(dict(entries))
        self._by_display_name: Mapping[str, CatalogEntry] = MappingProxyType(
            {normalize_key(e.display_name): e for e in entries.values()}
        )

    @classmethod
    def from_records(cls, records: Mapping[str, Mapping[str, Any]]) -> "LocalNutritionCatalog":
        entries: Dict[str, CatalogEntry] = {}
        for key, record in records.items():
            entry = _build_entry(key, record)
            if entry.key in entries:
                raise ValueError(f"Duplicate catalog key: {entry.key}")
            entries[entry.key] = entry
        logger.debug("Nutrition catalog built", extra={"entries": len(entries)})
        return cls(entries)

    def get(self, key: str) -> Optional[CatalogEntry]:
        return self._entries.get(normalize_key(key))

    def by_display_name(self, name: str) -> Optional[CatalogEntry]:
        return self._by_display_name.get(normalize_key(name))

    def items(self) -> Tuple[Tuple[str, CatalogEntry], ...]:
        return tuple(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=1)
def default_catalog() -> LocalNutritionCatalog:
    """Process-wide catalog built from the bundled data."""
    return LocalNutritionCatalog.from_records(CATALOG_DATA)
