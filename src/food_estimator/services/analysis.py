"""Classification-to-nutrition analysis shared by the gateway and the client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from food_estimator.domain.analysis import AnalysisResult, EmptyPredictionsError
from food_estimator.domain.classifier import Prediction
from food_estimator.services.nutrition import NutritionTable

UNKNOWN_LABEL = "unknown"


class ClassifierClient(Protocol):
    """Interface for the remote image classifier."""

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Return predictions ordered by descending confidence."""


def build_analysis_result(
    predictions: Sequence[Prediction], table: NutritionTable
) -> AnalysisResult:
    """Combine the top prediction with its nutrition estimate."""
    if not predictions:
        raise EmptyPredictionsError
    top = predictions[0]
    nutrition = table.lookup(top.label or UNKNOWN_LABEL)
    return AnalysisResult(
        food=top.label,
        score=top.score,
        calories=nutrition.calories,
        protein=nutrition.protein,
    )


@dataclass
class AnalysisService:
    """Classify an image and estimate its nutrition."""

    client: ClassifierClient
    table: NutritionTable

    async def analyze(self, image_bytes: bytes) -> AnalysisResult:
        """Run one classification round trip and shape the result."""
        predictions = await self.client.classify(image_bytes)
        return build_analysis_result(predictions, self.table)
