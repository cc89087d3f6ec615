"""Models for image classifier predictions."""

from pydantic import BaseModel, ConfigDict


class Prediction(BaseModel):
    """Single ranked guess from the remote classifier."""

    model_config = ConfigDict(extra="ignore")

    label: str | None = None
    score: float
