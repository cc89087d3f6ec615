"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from food_estimator.api.page import ESTIMATOR_PAGE_HTML
from food_estimator.app_logging import configure_logging
from food_estimator.containers import AppContainer
from food_estimator.domain.analysis import (
    ClassifierRejectedError,
    EmptyPredictionsError,
)

SERVER_ERROR_MESSAGE = "Server error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def estimator_page() -> HTMLResponse:
        """Image upload form that posts to the analyze endpoint."""
        return HTMLResponse(ESTIMATOR_PAGE_HTML)

    @app.post("/api/analyze")
    async def analyze(request: Request) -> JSONResponse:
        """Classify raw image bytes and return the nutrition estimate."""
        state_container: AppContainer = request.app.state.container
        try:
            image_bytes = await request.body()
            result = await state_container.analysis_service.analyze(image_bytes)
        except ClassifierRejectedError as exc:
            return JSONResponse({"error": exc.body}, status_code=exc.status_code)
        except EmptyPredictionsError as exc:
            logger.warning("Classifier returned no predictions")
            return JSONResponse(
                {"error": str(exc)}, status_code=status.HTTP_502_BAD_GATEWAY
            )
        except Exception:
            logger.exception("Image analysis failed")
            return JSONResponse(
                {"error": SERVER_ERROR_MESSAGE},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return JSONResponse(result.to_dict())

    return app
