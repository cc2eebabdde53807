"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from calorie_tracker.api.entries import router as entries_router
from calorie_tracker.api.images import router as images_router
from calorie_tracker.api.models import RecognizeFoodRequest
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import (
    INTERNAL_ERROR,
    INVALID_BODY,
    INVALID_REQUEST,
    TrackerError,
)


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

    app.include_router(entries_router)
    app.include_router(images_router)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        logger.info("Rejected request to %s: %s", request.url.path, errors)
        sources = {error["loc"][0] for error in errors if error.get("loc")}
        message = INVALID_BODY if sources <= {"body"} else INVALID_REQUEST
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/recognize-food", response_model=None)
    async def recognize_food(
        body: RecognizeFoodRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Estimate food name, calories and nutrients for an uploaded image."""
        state_container: AppContainer = request.app.state.container
        if body.file_name:
            logger.info("Recognizing uploaded file %s", body.file_name)
        try:
            result = await state_container.recognition_service.recognize(
                body.image_url
            )
        except TrackerError as exc:
            logger.warning(
                "Food recognition failed: %s",
                exc.message,
                extra={"image_url": body.image_url},
            )
            return _error_response(exc)
        except Exception:
            logger.exception("Food recognition error")
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
        return result.model_dump()

    return app


def _error_response(exc: TrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
