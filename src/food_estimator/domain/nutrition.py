"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionEntry:
    """Estimated calories and protein for a food label."""

    calories: float
    protein: float


UNKNOWN_NUTRITION = NutritionEntry(calories=0, protein=0)
