"""HTTP surface for the resume analysis pipeline.

Pipeline degradations are reported in-band: the response is HTTP 200 with
``ok: false`` and an ``error`` message next to a complete fallback profile.
Only a request with nothing to fetch is answered with 400.
"""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from resume_analyzer.api.schemas import AnalyzeResumeRequest
from resume_analyzer.config.settings import Settings
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.exceptions import InputError
from resume_analyzer.processor.processor import Processor, build_processor

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

router = APIRouter()


@router.post("/analyze-resume")
@router.post("/")
def analyze_resume(payload: AnalyzeResumeRequest, request: Request) -> JSONResponse:
    processor: Processor = request.app.state.processor
    settings: Settings = request.app.state.settings
    try:
        analysis_request = payload.to_analysis_request(settings.storage_default_bucket)
        result = processor.process(analysis_request)
    except InputError as exc:
        Log.warning(f"Rejected analysis request: {exc}")
        return JSONResponse(status_code=400, content={"ok": False, "error": str(exc)})
    return JSONResponse(content=result.to_dict())


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


async def _invalid_body(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Invalid request body on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"ok": False, "error": "Request body must be a JSON object"},
    )


async def _cors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    try:
        yield
    finally:
        app.state.processor.close()
        Log.info("Processor resources released")


def create_app(settings: Settings | None = None, processor: Processor | None = None) -> FastAPI:
    """Build the FastAPI application around a Processor."""
    settings = settings or Settings()
    app = FastAPI(title="Resume Analyzer", version="1.0.0", lifespan=_lifespan)
    app.state.settings = settings
    app.state.processor = processor or build_processor(settings)
    app.include_router(router)
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.middleware("http")(_cors)
    return app
