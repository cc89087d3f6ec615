"""Tests for the command-line estimator."""

from food_estimator.domain.classifier import Prediction
from food_estimator.main import main
from tests.conftest import FakeClassifierClient


def test_main_prints_estimate(
    container, client_classifier: FakeClassifierClient, tmp_path, capsys
) -> None:
    client_classifier.predictions = [Prediction(label="Steak", score=0.8)]
    image = tmp_path / "dinner.jpg"
    image.write_bytes(b"\xff\xd8\xffsteak")

    exit_code = main([str(image)], container=container)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Food: Steak (confidence: 80.00%)" in captured.out
    assert "Estimated Calories: 650 kcal" in captured.out
    assert client_classifier.calls == [b"\xff\xd8\xffsteak"]


def test_main_without_image_reports_error(
    container, client_classifier: FakeClassifierClient, capsys
) -> None:
    exit_code = main([], container=container)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Please select an image." in captured.err
    assert client_classifier.calls == []


def test_main_uses_client_classifier_not_gateway(
    container,
    gateway_classifier: FakeClassifierClient,
    client_classifier: FakeClassifierClient,
    tmp_path,
) -> None:
    image = tmp_path / "lunch.png"
    image.write_bytes(b"png")

    main([str(image)], container=container)

    assert client_classifier.calls == [b"png"]
    assert gateway_classifier.calls == []


def test_main_missing_file_reports_error(
    container, client_classifier: FakeClassifierClient, tmp_path, capsys
) -> None:
    exit_code = main([str(tmp_path / "nope.jpg")], container=container)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Cannot read image" in captured.err
    assert client_classifier.calls == []


def test_main_directory_path_reports_error(
    container, client_classifier: FakeClassifierClient, tmp_path, capsys
) -> None:
    exit_code = main([str(tmp_path)], container=container)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Cannot read image" in captured.err
    assert client_classifier.calls == []
