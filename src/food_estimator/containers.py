"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_estimator.adapters.huggingface_client import HttpxClassifierClient
from food_estimator.config import Settings
from food_estimator.services.analysis import AnalysisService
from food_estimator.services.estimator import EstimatorClient
from food_estimator.services.nutrition import NutritionTable, load_nutrition_table


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_table: NutritionTable
    analysis_service: AnalysisService
    client_analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]

    def estimator_client(self) -> EstimatorClient:
        """Return a fresh estimator form bound to the client classifier."""
        return EstimatorClient(self.client_analysis_service)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    nutrition_table = load_nutrition_table(resolved_settings.nutrition_table_path)
    gateway_classifier = HttpxClassifierClient.create(
        api_token=resolved_settings.huggingface_api_token,
        model=resolved_settings.classifier_model,
        base_url=resolved_settings.inference_base_url,
        timeout=resolved_settings.classifier_timeout_seconds,
    )
    client_classifier = HttpxClassifierClient.create(
        api_token=resolved_settings.huggingface_public_api_token,
        model=resolved_settings.client_classifier_model,
        base_url=resolved_settings.inference_base_url,
        timeout=resolved_settings.classifier_timeout_seconds,
    )

    async def close_resources() -> None:
        await gateway_classifier.close()
        await client_classifier.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_table=nutrition_table,
        analysis_service=AnalysisService(gateway_classifier, nutrition_table),
        client_analysis_service=AnalysisService(client_classifier, nutrition_table),
        close_resources=close_resources,
    )
