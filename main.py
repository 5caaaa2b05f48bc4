import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from settings import get_settings
from transit_scraper.assemble.models import BusSchedule, StopSequenceResult
from transit_scraper.assemble.schedule import assemble_bus_schedule
from transit_scraper.assemble.stops import assemble_stop_sequence
from transit_scraper.errors import ParseError, StructureNotFoundError
from transit_scraper.extract.matchers import Heuristics
from transit_scraper.middleware import RequestLoggingMiddleware
from transit_scraper.rpc.normalize import parse_response

settings = get_settings()
HEURISTICS = Heuristics.from_settings(settings)

# Structured logging: include module and level; handlers can add JSON later
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    """Return consistent JSON error for unhandled exceptions (500). Skip validation/HTTP errors."""
    from fastapi.exceptions import RequestValidationError
    if isinstance(exc, (HTTPException, RequestValidationError)):
        raise exc
    logger.exception("telemetry unhandled_exception path=%s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred."},
    )


app.add_middleware(RequestLoggingMiddleware)


@app.get("/health")
def health(request: Request):
    logger.info("telemetry route=health")
    return {"status": "ok"}


async def _parse_body(request: Request):
    raw = await request.body()
    if not raw.strip():
        raise HTTPException(status_code=400, detail="Request body must be a raw Maps RPC response.")
    try:
        return await run_in_threadpool(parse_response, raw)
    except ParseError as e:
        logger.warning("telemetry parse_error path=%s error=%s", request.url.path, str(e))
        raise HTTPException(status_code=400, detail=str(e)) from e


@app.post("/extract/stops", response_model=StopSequenceResult)
async def extract_stops(request: Request):
    """Body: raw transit/lines response (XSSI prefix optional). Returns the assembled stop sequence."""
    data = await _parse_body(request)
    logger.info("telemetry route=extract_stops")
    try:
        # Tree walks are CPU-bound; keep them off the event loop
        return await run_in_threadpool(assemble_stop_sequence, data, HEURISTICS)
    except StructureNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@app.post("/extract/schedule", response_model=BusSchedule)
async def extract_schedule(request: Request):
    """Body: raw place preview response. Returns place name, bus routes and timetable."""
    data = await _parse_body(request)
    logger.info("telemetry route=extract_schedule")
    try:
        return await run_in_threadpool(assemble_bus_schedule, data)
    except StructureNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
