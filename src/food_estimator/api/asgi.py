"""ASGI entrypoint for the food estimator API."""

from food_estimator.api.app import create_app
from food_estimator.containers import build_container

app = create_app(build_container())
