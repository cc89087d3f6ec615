"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The gateway and the estimator client each have their own credential and
    model so the two call sites can target different classifiers.
    """

    huggingface_api_token: str | None = None
    huggingface_public_api_token: str | None = None
    classifier_model: str = "ashaduzzaman/vit-finetuned-food101"
    client_classifier_model: str = "google/vit-base-patch16-224"
    inference_base_url: str = "https://api-inference.huggingface.co/models"
    classifier_timeout_seconds: float | None = None
    nutrition_table_path: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
