"""FastAPI entry point. Exposes GET /health and POST /analyze, which runs the
scoring pipeline on one message and wraps the result in the response envelope."""

import logging
import time
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aurashield.analyzer import message_analyzer
from aurashield.auth import verify_api_key
from aurashield.config import Config
from aurashield.models import (
    AnalyzeData,
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    HealthResponse,
)

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=Config.SERVICE_NAME,
    description="Scam message risk scoring",
    version=Config.VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "x-api-key"],
)

HTTP_ERROR_CODES = {
    400: "INVALID_REQUEST_BODY",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
}


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a one-line client message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON in request body"
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "request body"
    if first.get("type") == "missing":
        return f"{field} missing"
    return f"{field}: {first.get('msg', 'invalid value')}"


@app.on_event("startup")
async def _on_startup() -> None:
    logger.info(
        f"[INIT] {Config.SERVICE_NAME} v{Config.VERSION} started | "
        f"env={Config.APP_ENV} | API keys configured: {len(Config.API_KEYS)}"
    )


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.warning(f"[{request.url.path}] Validation failed: {message}")
    return _error(400, "INVALID_REQUEST_BODY", message)


@app.exception_handler(StarletteHTTPException)
async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)

    # A wrong method on a known path is reported as an unknown endpoint
    if exc.status_code in (404, 405):
        logger.warning(f"[404] Route not found: {request.method} {request.url.path}")
        return _error(404, "NOT_FOUND", f"Endpoint {request.method} {request.url.path} not found")

    error = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return _error(exc.status_code, error, str(exc.detail))


@app.exception_handler(Exception)
async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[ERROR] Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return _error(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    logger.info("[/health] GET request received")
    return HealthResponse(
        status="ok",
        service=Config.SERVICE_NAME,
        version=Config.VERSION,
        timestamp=_utc_now(),
    )


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze_message(
    request: AnalyzeRequest,
    api_key: str = Depends(verify_api_key),
):
    """Score one message and return the full risk assessment.

    Stages run inside MessageAnalyzer, which already falls back to a safe
    non-scam result on scoring faults; anything failing outside it here is a
    500.
    """
    try:
        started = time.perf_counter()
        session_id = request.sessionId
        logger.info(
            f"[/analyze] Validation passed | sessionId: {session_id} | "
            f"source: {request.source} | msg_len={len(request.message.text)}"
        )

        analysis = message_analyzer.analyze(request.message.text.strip(), request.source)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[/analyze] Analysis complete in {elapsed_ms:.1f}ms | "
            f"is_scam: {analysis.is_scam} | confidence: {analysis.confidence_score:.2f} | "
            f"risk: {analysis.risk_level}"
        )

        return AnalyzeResponse(
            data=AnalyzeData(
                sessionId=session_id,
                sender=request.message.sender.strip(),
                source=request.source,
                timestamp=_utc_now(),
                analysis=analysis,
            )
        )

    except Exception as exc:
        logger.error(f"[/analyze] Unexpected error: {exc}", exc_info=True)
        return _error(
            500,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred during processing. Please try again.",
        )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
