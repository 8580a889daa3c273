import logging
from pathlib import Path
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .advisor import AdvisoryFailure, FailureKind, request_advisory
from .functions import build_prompt
from .settings import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to process AI advisory."

# Unmatched paths answer with the front-end whatever the method.
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Every failure is reported to the caller as a server error.
FAILURE_STATUS_CODES = {
    FailureKind.CONFIGURATION: 500,
    FailureKind.UPSTREAM: 500,
    FailureKind.INVALID_RESPONSE: 500,
    FailureKind.UNEXPECTED: 500,
}


def _resolve_static(static_dir: Path, path: str) -> Path | None:
    """Return the file for `path` if it lives inside `static_dir`."""
    root = static_dir.resolve()
    candidate = (root / path).resolve()
    if path and candidate.is_relative_to(root) and candidate.is_file():
        return candidate
    index = root / "index.html"
    return index if index.is_file() else None


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="AI Portfolio Advisor")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "service": settings.app_name}

    @app.post("/api/advisor")
    async def advisor(request: Request, portfolio: dict[str, Any] = Body(...)):
        """Build the advisory prompt and relay the model's JSON answer."""
        prompt = build_prompt(portfolio)
        result = await request_advisory(prompt, request.app.state.settings)

        if isinstance(result, AdvisoryFailure):
            return JSONResponse(
                status_code=FAILURE_STATUS_CODES[result.kind],
                content={"error": FAILURE_MESSAGE, "details": result.detail},
            )
        return JSONResponse(content=result.advisory)

    @app.api_route("/{full_path:path}", methods=FALLBACK_METHODS)
    def static_fallback(full_path: str):
        """Serve the front-end for any path no other route claims."""
        target = _resolve_static(settings.static_dir, full_path)
        if target is None:
            return JSONResponse(status_code=404, content={"detail": "Not Found"})
        return FileResponse(target)

    return app


app = create_app(get_settings())


def run() -> None:
    import uvicorn

    settings = app.state.settings
    configure_logging(settings)
    logger.info("AI Advisor Server running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
