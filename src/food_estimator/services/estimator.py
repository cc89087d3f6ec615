"""Estimator form flow that calls the classifier directly."""

import logging
from dataclasses import dataclass
from enum import Enum

from food_estimator.domain.analysis import AnalysisResult, ClassifierRejectedError
from food_estimator.services.analysis import AnalysisService

_logger = logging.getLogger(__name__)

MISSING_IMAGE_MESSAGE = "Please select an image."
FALLBACK_ERROR_MESSAGE = "Something went wrong."


class EstimatorStatus(Enum):
    """Display states of the estimator form."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class EstimatorClient:
    """Form submission handler holding the current display state.

    Only one submission is in flight at a time: while analyzing, the submit
    control is disabled and further submissions are ignored.
    """

    analysis_service: AnalysisService
    status: EstimatorStatus = EstimatorStatus.IDLE
    result: AnalysisResult | None = None
    error: str = ""

    @property
    def can_submit(self) -> bool:
        """Whether the submit control is enabled."""
        return self.status is not EstimatorStatus.ANALYZING

    @property
    def submit_label(self) -> str:
        return "Analyzing..." if self.status is EstimatorStatus.ANALYZING else "Analyze"

    async def submit(self, image_bytes: bytes | None) -> EstimatorStatus:
        """Handle one form submission with the selected image, if any."""
        if not self.can_submit:
            return self.status
        self.result = None
        self.error = ""
        if not image_bytes:
            return self._fail(MISSING_IMAGE_MESSAGE)

        self.status = EstimatorStatus.ANALYZING
        try:
            result = await self.analysis_service.analyze(image_bytes)
        except ClassifierRejectedError as exc:
            self._fail(exc.body or FALLBACK_ERROR_MESSAGE)
        except Exception as exc:
            _logger.exception("Estimator analysis failed")
            self._fail(str(exc) or FALLBACK_ERROR_MESSAGE)
        else:
            self.result = result
            self.status = EstimatorStatus.SUCCESS
        finally:
            # Cancellation must not leave the submit control disabled.
            if self.status is EstimatorStatus.ANALYZING:
                self.status = EstimatorStatus.IDLE
        return self.status

    def _fail(self, message: str) -> EstimatorStatus:
        self.error = message
        self.status = EstimatorStatus.ERROR
        return self.status


def format_confidence(score: float) -> str:
    """Render a 0-1 score as a percentage with two decimals."""
    return f"{score * 100:.2f}%"


def format_result(result: AnalysisResult) -> str:
    """Format an analysis result for display."""
    return "\n".join(
        [
            f"Food: {result.food} (confidence: {format_confidence(result.score)})",
            f"Estimated Calories: {result.calories} kcal",
            f"Estimated Protein: {result.protein} g",
        ]
    )
