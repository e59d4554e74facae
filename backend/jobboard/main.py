import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from jobboard.config import settings
from jobboard.dependencies import get_record_store
from jobboard.routers import jobs
from jobboard.schemas.health import HealthResponse
from jobboard.services.record_store import RecordStore, StoreHolder

API_VERSION = "0.1.0"

logger = logging.getLogger("jobboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load the job data once; requests only ever read it
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    from jobboard.services.loader_service import load_record_store
    store = load_record_store(settings)
    if store.degraded:
        logger.error("Job data loaded with %d problem(s); serving what was readable.", len(store.diagnostics))
    app.state.store_holder.swap(store)
    yield


app = FastAPI(
    title="Job Board API",
    description="Search and browse job postings",
    version=API_VERSION,
    lifespan=lifespan,
)
app.state.store_holder = StoreHolder()

app.include_router(jobs.router, prefix=settings.api_prefix)


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/health", response_model=HealthResponse)
async def health(store: RecordStore = Depends(get_record_store)):
    return HealthResponse(
        status="degraded" if store.degraded else "ok",
        version=API_VERSION,
        jobs=len(store.summaries),
        job_details=len(store.details),
        diagnostics=list(store.diagnostics),
    )
