"""FastAPI app factory.

The HTTP layer is a thin adapter: it authenticates the caller, validates the
body, runs :class:`~design_bot.pipeline.DesignPipeline` and maps errors to
status codes.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from design_bot import __version__
from design_bot.config import DesignBotSettings
from design_bot.errors import ProvisioningError, TranscriptValidationError, UpstreamError
from design_bot.pipeline import (
    SUCCESS_MESSAGE,
    DesignPipeline,
    PipelineResources,
    TranscriptRequest,
)

logger = logging.getLogger(__name__)

PipelineFactory = Callable[[DesignBotSettings], AbstractContextManager[DesignPipeline]]

FUNCTION_KEY_HEADER = "x-functions-key"


def _check_function_key(request: Request, expected: str) -> None:
    if not expected:
        return
    supplied = request.headers.get(FUNCTION_KEY_HEADER) or request.query_params.get("code") or ""
    if not hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(status_code=401, detail="Invalid or missing function key")


def create_app(
    settings: DesignBotSettings | None = None,
    pipeline_factory: PipelineFactory | None = None,
) -> FastAPI:
    settings = settings or DesignBotSettings()
    factory: PipelineFactory = pipeline_factory or PipelineResources

    app = FastAPI(
        title="Design Bot",
        version=__version__,
        description="Turns meeting transcripts into GitHub repositories with issues.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings

    @app.exception_handler(TranscriptValidationError)
    def _on_validation_error(_request: Request, exc: TranscriptValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(UpstreamError)
    def _on_upstream_error(_request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error("Completion API failed", extra={"error": str(exc)})
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(ProvisioningError)
    def _on_provisioning_error(_request: Request, exc: ProvisioningError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "detail": str(exc),
                "step": exc.step,
                "repository": exc.repository,
                "created_issue_numbers": list(exc.created_issue_numbers),
            },
        )

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.post("/api/ProcessDesignDoc", response_class=PlainTextResponse)
    async def process_design_doc(request: Request) -> str:
        _check_function_key(request, settings.function_key)
        transcript = TranscriptRequest.from_body(await request.body())

        missing = settings.missing_credentials()
        if missing:
            raise HTTPException(
                status_code=409,
                detail=f"{' and '.join(missing)} required for this endpoint",
            )

        def _run() -> str:
            with factory(settings) as pipeline:
                pipeline.run(transcript)
            return SUCCESS_MESSAGE

        # The pipeline makes blocking HTTP calls.
        return await run_in_threadpool(_run)

    return app
