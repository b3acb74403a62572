"""Comment Spam API — production with logging."""
import logging
import time
from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from comment_spam.dashboard import summarize
from comment_spam.data import SAMPLE_CSV, export_csv, parse_csv
from comment_spam.media import extract_media
from comment_spam.models import (
    BulkPredictionRequest, DashboardSummary, MediaPreview, MediaRequest,
    PredictionRequest, PredictionResult,
)
from comment_spam.service import PredictionService
from comment_spam.settings import get_settings

from comment_spam.config import API, MAX_BATCH, MAX_TEXT_LEN

from comment_spam.exceptions import AppError, InvalidInputError

# ──────────────── Logging setup (minimal, prod-friendly) ────────────────
SETTINGS = get_settings()
logging.basicConfig(
    level=SETTINGS.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
log = logging.getLogger("comment_spam.api")

log.info(
    (
        "API starting with LOG_LEVEL=%s | "
        "SINGLE_DELAY=%d-%dms | BATCH_DELAY=%dms | "
        "MAX_BATCH=%d | MAX_TEXT_LEN=%d"
    ),
    SETTINGS.log_level,
    SETTINGS.single_delay_min_ms,
    SETTINGS.single_delay_max_ms,
    SETTINGS.batch_delay_ms,
    MAX_BATCH,
    MAX_TEXT_LEN,
)


app = FastAPI(
    title="Comment Spam API",
    version="1.0.0",
    description=(
        "🛡️ **Comment Spam API**\n\n"
        "Labels social-media comments as spam or not with respect to the post "
        "they reply to.\n\n"
        "**Features:**\n"
        "- Single and batch scoring with a heuristic ensemble.\n"
        "- CSV upload and export of the session's results.\n"
        "- Dashboard summary and media previews.\n"
        "### 🔍 Endpoints\n"
        "- `/predict` — Score one post/comment pair.\n"
        "- `/predict/batch` — Score a JSON batch.\n"
        "- `/predict/csv` — Score an uploaded CSV document.\n"
        "- `/predictions`, `/dashboard`, `/export` — Session results.\n"
    ),
)

# ──────────────── Consistent error responses (global) ────────────────
def _err(content: dict, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)

def _env(message: str, code: str, retryable: bool = False, details: Optional[dict] = None) -> dict:
    return {"error": message, "code": code, "retryable": retryable, "details": details or {}}

@app.exception_handler(RequestValidationError)
async def _handle_req_validation(req: Request, exc: RequestValidationError):
    log.warning("Request validation error path=%s errors=%s", req.url.path, exc.errors())
    return _err(
    _env(
        "Invalid request payload",
        "VALIDATION_ERROR",
        False,
        {"errors": jsonable_encoder(exc.errors())},
    ),
    status.HTTP_422_UNPROCESSABLE_ENTITY,
)

@app.exception_handler(ValidationError)
async def _handle_pydantic_validation(req: Request, exc: ValidationError):
    log.warning("Pydantic validation error path=%s errors=%s", req.url.path, exc.errors())
    return _err(_env("Validation failed", "VALIDATION_ERROR", False,
                     {"errors": jsonable_encoder(exc.errors(include_url=False))}),
                status.HTTP_422_UNPROCESSABLE_ENTITY)

@app.exception_handler(AppError)
async def _handle_app_error(req: Request, exc: AppError):
    # 4xx → warn, 5xx → error
    lvl = logging.WARNING if 400 <= exc.status_code < 500 else logging.ERROR
    log.log(
    lvl,
    "AppError path=%s code=%s msg=%s details=%s",
    req.url.path,
    exc.code,
    exc.message,
    exc.details,
)
    return _err(_env(exc.message, exc.code, getattr(exc, "retryable", False), exc.details),
                exc.status_code)

@app.exception_handler(Exception)
async def _handle_unexpected(req: Request, exc: Exception):
    """Handle any unexpected, unhandled server errors."""
    log.exception("Unexpected error path=%s: %s", req.url.path, exc)
    return _err(
        _env("Unexpected server error", "UNEXPECTED_ERROR"),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

# ──────────────── Helpers ────────────────
@lru_cache
def get_service() -> PredictionService:
    log.info("Initializing PredictionService...")
    return PredictionService(settings=SETTINGS)

def _validate_batch_size(n: int):
    log.debug("Validating batch: %d items", n)
    if n > MAX_BATCH:
        raise InvalidInputError(
    f"batch exceeds max size {MAX_BATCH}",
    {"max_batch": MAX_BATCH},
)

def _csv_response(body: str, filename: str) -> PlainTextResponse:
    return PlainTextResponse(
        body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

# ──────────────── Endpoints ────────────────
@app.post("/predict", response_model=PredictionResult)
async def predict(
    payload: PredictionRequest, service: PredictionService = Depends(get_service)
) -> PredictionResult:
    """Score one post/comment pair.

    Blank fields are rejected with INVALID_INPUT before scoring.
    """
    log.info("POST /predict started")
    t0 = time.perf_counter()
    result = await service.predict(payload)
    log.info(
        "POST /predict completed: spam=%s in %.2f ms",
        result.is_spam, (time.perf_counter() - t0) * 1000.0,
    )
    return result

@app.post("/predict/batch", response_model=List[PredictionResult])
async def predict_batch(
    payload: BulkPredictionRequest, service: PredictionService = Depends(get_service)
) -> List[PredictionResult]:
    """Score an ordered batch; any invalid item fails the whole batch."""
    log.info("POST /predict/batch started")
    _validate_batch_size(len(payload.data))
    results = await service.predict_batch(payload.data)
    log.info("POST /predict/batch completed: items=%d", len(results))
    return results

@app.post("/predict/csv", response_model=List[PredictionResult])
async def predict_csv(
    request: Request, service: PredictionService = Depends(get_service)
) -> List[PredictionResult]:
    """Score a CSV document with "post" and "comment" columns.

    The raw request body is the CSV text.
    """
    log.info("POST /predict/csv started")
    raw = await request.body()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidInputError("CSV body must be UTF-8 encoded") from e
    requests = parse_csv(text)
    _validate_batch_size(len(requests))
    results = await service.predict_batch(requests)
    log.info("POST /predict/csv completed: items=%d", len(results))
    return results

@app.get("/predictions", response_model=List[PredictionResult])
def list_predictions(service: PredictionService = Depends(get_service)) -> List[PredictionResult]:
    return service.history()

@app.delete("/predictions")
def clear_predictions(service: PredictionService = Depends(get_service)) -> Dict:
    service.clear()
    return {"status": "success"}

@app.get("/dashboard", response_model=DashboardSummary)
def dashboard(service: PredictionService = Depends(get_service)) -> DashboardSummary:
    return summarize(service.history())

@app.get("/export")
def export(service: PredictionService = Depends(get_service)) -> PlainTextResponse:
    """Download the session's results as CSV."""
    return _csv_response(export_csv(service.history()), API.export_filename)

@app.get("/sample")
def sample() -> PlainTextResponse:
    return _csv_response(SAMPLE_CSV, API.sample_filename)

@app.post("/media", response_model=None)
def media(payload: MediaRequest) -> MediaPreview | Dict:
    """Return a media preview for the first usable URL in the text."""
    preview = extract_media(payload.text)
    if preview is None:
        return {"error": "No media URL found in text"}
    return preview
