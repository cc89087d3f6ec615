"""Tests for result shaping and the analysis service."""

import asyncio

import pytest

from food_estimator.domain.analysis import AnalysisResult, EmptyPredictionsError
from food_estimator.domain.classifier import Prediction
from food_estimator.services.analysis import AnalysisService, build_analysis_result
from food_estimator.services.nutrition import NutritionTable
from tests.conftest import FakeClassifierClient


def test_mixed_case_label_keeps_original_case() -> None:
    result = build_analysis_result(
        [Prediction(label="Pizza", score=0.87)], NutritionTable.default()
    )

    assert result == AnalysisResult(food="Pizza", score=0.87, calories=266, protein=11)


def test_unknown_food_uses_zero_sentinel() -> None:
    result = build_analysis_result(
        [Prediction(label="durian", score=0.5)], NutritionTable.default()
    )

    assert result.to_dict() == {
        "food": "durian",
        "score": 0.5,
        "calories": 0,
        "protein": 0,
    }


def test_only_first_prediction_is_used() -> None:
    result = build_analysis_result(
        [
            Prediction(label="sushi", score=0.4),
            Prediction(label="pizza", score=0.9),
        ],
        NutritionTable.default(),
    )

    assert result.food == "sushi"
    assert result.score == 0.4
    assert result.calories == 200


def test_missing_label_looks_up_unknown() -> None:
    result = build_analysis_result(
        [Prediction(score=0.3)], NutritionTable.default()
    )

    assert result.food is None
    assert result.calories == 0
    assert result.protein == 0


def test_empty_predictions_raise_named_error() -> None:
    with pytest.raises(EmptyPredictionsError):
        build_analysis_result([], NutritionTable.default())


def test_analysis_service_classifies_and_shapes() -> None:
    client = FakeClassifierClient(predictions=[Prediction(label="Banana", score=0.99)])
    service = AnalysisService(client, NutritionTable.default())

    result = asyncio.run(service.analyze(b"image-bytes"))

    assert client.calls == [b"image-bytes"]
    assert result.food == "Banana"
    assert result.calories == 89
    assert result.protein == 1.1
