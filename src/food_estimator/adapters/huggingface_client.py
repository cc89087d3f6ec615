"""Hugging Face Inference API client for image classification."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import TypeAdapter

from food_estimator.domain.analysis import (
    ClassifierRejectedError,
    MalformedPredictionsError,
)
from food_estimator.domain.classifier import Prediction
from food_estimator.services.analysis import ClassifierClient

_logger = logging.getLogger(__name__)

_PREDICTIONS_ADAPTER = TypeAdapter(list[Prediction])


@dataclass
class HttpxClassifierClient(ClassifierClient):
    """HTTPX-backed classifier client posting raw image bytes."""

    api_token: str | None
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float | None = None

    @classmethod
    def create(
        cls,
        api_token: str | None,
        model: str,
        base_url: str,
        timeout: float | None = None,
    ) -> "HttpxClassifierClient":
        """Create a classifier client with a managed httpx session."""
        return cls(
            api_token=api_token,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}"

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Send image bytes to the model endpoint and parse ranked predictions."""
        headers = {"Content-Type": "application/octet-stream"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        response = await self.http_client.post(
            self.url,
            content=image_bytes,
            headers=headers,
            timeout=self.timeout,
        )
        if not response.is_success:
            _logger.warning(
                "Classifier rejected request: model=%s status=%s",
                self.model,
                response.status_code,
            )
            raise ClassifierRejectedError(response.status_code, response.text)
        payload = response.json()
        if not isinstance(payload, list):
            raise MalformedPredictionsError(
                f"Expected a list of predictions, got {type(payload).__name__}"
            )
        return _PREDICTIONS_ADAPTER.validate_python(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
