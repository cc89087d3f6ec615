"""Static nutrition lookup table."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter

from food_estimator.domain.nutrition import UNKNOWN_NUTRITION, NutritionEntry

_logger = logging.getLogger(__name__)

_TABLE_ADAPTER = TypeAdapter(dict[str, NutritionEntry])

DEFAULT_NUTRITION: Mapping[str, NutritionEntry] = MappingProxyType(
    {
        "pizza": NutritionEntry(calories=266, protein=11),
        "cheeseburger": NutritionEntry(calories=303, protein=17),
        "sushi": NutritionEntry(calories=200, protein=8),
        "apple": NutritionEntry(calories=52, protein=0.3),
        "banana": NutritionEntry(calories=89, protein=1.1),
        "strawberry": NutritionEntry(calories=32, protein=0.7),
        "steak": NutritionEntry(calories=650, protein=62),
        "salad": NutritionEntry(calories=150, protein=5),
        "pasta": NutritionEntry(calories=131, protein=5),
        "sandwich": NutritionEntry(calories=250, protein=10),
        "ice_cream": NutritionEntry(calories=207, protein=3.5),
        "donut": NutritionEntry(calories=452, protein=4.5),
        "cookie": NutritionEntry(calories=150, protein=2),
        "chocolate": NutritionEntry(calories=546, protein=7.6),
        "chips": NutritionEntry(calories=152, protein=2),
        "bread": NutritionEntry(calories=265, protein=9),
        "rice": NutritionEntry(calories=130, protein=2.7),
        "soup": NutritionEntry(calories=75, protein=3),
        "cereal": NutritionEntry(calories=100, protein=2),
        "yogurt": NutritionEntry(calories=59, protein=10),
        "milk": NutritionEntry(calories=42, protein=3.4),
        "coffee": NutritionEntry(calories=2, protein=0.3),
        "tea": NutritionEntry(calories=1, protein=0.1),
        "juice": NutritionEntry(calories=45, protein=0.7),
    }
)


class NutritionTable(Mapping[str, NutritionEntry]):
    """Read-only mapping from lowercase food label to nutrition entry."""

    def __init__(self, entries: Mapping[str, NutritionEntry]) -> None:
        normalized: dict[str, NutritionEntry] = {}
        for label, entry in entries.items():
            key = label.lower()
            if key in normalized:
                raise ValueError(f"Duplicate nutrition label: {label!r}")
            normalized[key] = entry
        self._entries = MappingProxyType(normalized)

    def __getitem__(self, label: str) -> NutritionEntry:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, label: str) -> NutritionEntry:
        """Return the entry for a label, or zeros when the food is unknown."""
        return self._entries.get(label.lower(), UNKNOWN_NUTRITION)

    @classmethod
    def default(cls) -> "NutritionTable":
        """Return the built-in table."""
        return _DEFAULT_TABLE

    @classmethod
    def from_json_file(cls, path: str | Path) -> "NutritionTable":
        """Load a table from a JSON object of label -> {calories, protein}."""
        raw = Path(path).read_bytes()
        entries = _TABLE_ADAPTER.validate_json(raw)
        _logger.info("Loaded nutrition table: path=%s entries=%s", path, len(entries))
        return cls(entries)


def load_nutrition_table(path: str | None) -> NutritionTable:
    """Return the override table at ``path`` or the built-in one."""
    if path is None:
        return NutritionTable.default()
    return NutritionTable.from_json_file(path)


_DEFAULT_TABLE = NutritionTable(DEFAULT_NUTRITION)
