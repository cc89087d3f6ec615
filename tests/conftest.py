"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_estimator.config import Settings
from food_estimator.containers import AppContainer
from food_estimator.domain.classifier import Prediction
from food_estimator.services.analysis import AnalysisService, ClassifierClient
from food_estimator.services.nutrition import NutritionTable


@dataclass
class FakeClassifierClient(ClassifierClient):
    """Fake classifier returning fixed predictions or raising an error."""

    predictions: list[Prediction] = field(
        default_factory=lambda: [
            Prediction(label="Pizza", score=0.91),
            Prediction(label="lasagna", score=0.04),
        ]
    )
    error: Exception | None = None
    calls: list[bytes] = field(default_factory=list)

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.predictions


@pytest.fixture
def settings() -> Settings:
    return Settings(
        huggingface_api_token="server-token",
        huggingface_public_api_token="public-token",
        inference_base_url="https://inference.test/models",
    )


@pytest.fixture
def gateway_classifier() -> FakeClassifierClient:
    return FakeClassifierClient()


@pytest.fixture
def client_classifier() -> FakeClassifierClient:
    return FakeClassifierClient()


@pytest.fixture
def container(
    settings: Settings,
    gateway_classifier: FakeClassifierClient,
    client_classifier: FakeClassifierClient,
) -> AppContainer:
    table = NutritionTable.default()
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    return AppContainer(
        settings=settings,
        nutrition_table=table,
        analysis_service=AnalysisService(gateway_classifier, table),
        client_analysis_service=AnalysisService(client_classifier, table),
        close_resources=close_resources,
    )
