"""Read-only lookup over the category and unit reference data."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .units import Category, Unit, payload_matches

logger = logging.getLogger(__name__)


class UnitRegistry:
    """Immutable index of categories and units.

    Construction validates the reference data and raises on integrity
    faults, so a registry that exists is internally consistent:

        - category ids and unit ids are unique
        - every unit's ``category_id`` resolves to exactly one category
        - every unit carries the payload its category's strategy requires

    Lookups by id, abbreviation or alias are case-insensitive. When two
    units share a search term the first registered unit keeps it.
    """

    def __init__(self, categories: Iterable[Category], units: Iterable[Unit]):
        self._categories: Dict[str, Category] = {}
        self._units: Dict[str, Unit] = {}
        self._terms: Dict[str, Unit] = {}

        for category in categories:
            if category.id in self._categories:
                raise ValueError(f"Duplicate category id: {category.id}")
            self._categories[category.id] = category

        for unit in units:
            self._add_unit(unit)

        logger.info(
            "Loaded %d units across %d categories",
            len(self._units),
            len(self._categories),
        )

    def _add_unit(self, unit: Unit) -> None:
        if unit.id in self._units:
            raise ValueError(f"Duplicate unit id: {unit.id}")
        category = self._categories.get(unit.category_id)
        if category is None:
            raise ValueError(
                f"Unit '{unit.id}' references unknown category '{unit.category_id}'"
            )
        if not payload_matches(unit, category.conversion_type):
            raise ValueError(
                f"Unit '{unit.id}' payload {type(unit.payload).__name__} does not "
                f"match {category.conversion_type.value} category '{category.id}'"
            )
        self._units[unit.id] = unit

        for term in (unit.id.lower(), *unit.search_terms()):
            key = term.strip()
            existing = self._terms.get(key)
            if existing is None:
                self._terms[key] = unit
            elif existing.id != unit.id:
                logger.debug(
                    "Term %r already maps to %s; ignored for %s",
                    key,
                    existing.id,
                    unit.id,
                )

    def get_category(self, category_id: str) -> Optional[Category]:
        return self._categories.get(category_id)

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        return self._units.get(unit_id)

    def find_unit(self, query: str) -> Optional[Unit]:
        """Resolve a unit by id, abbreviation or alias.

        Args:
            query (str): User text such as ``"km"``, ``"°F"`` or ``"Celsius"``.

        Returns:
            Unit | None: Matching unit, or None when nothing matches exactly.
        """
        return self._terms.get(query.strip().lower())

    def units_in_category(self, category_id: str) -> List[Unit]:
        return [u for u in self._units.values() if u.category_id == category_id]

    def categories(self) -> List[Category]:
        return list(self._categories.values())

    def units(self) -> List[Unit]:
        return list(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units
