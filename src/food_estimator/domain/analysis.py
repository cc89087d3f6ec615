"""Analysis result and failure kinds."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Top prediction combined with its nutrition estimate."""

    food: str | None
    score: float
    calories: float
    protein: float

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape sent to callers."""
        return asdict(self)


class AnalysisError(Exception):
    """Base class for analysis failures."""


class ClassifierRejectedError(AnalysisError):
    """The remote classifier answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class EmptyPredictionsError(AnalysisError):
    """The remote classifier returned no predictions."""

    def __init__(self) -> None:
        super().__init__("No predictions returned")


class MalformedPredictionsError(AnalysisError):
    """The remote classifier returned a body that is not a prediction list."""
