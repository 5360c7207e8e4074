import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from app.api.bike import router as bike_router
from app.api.classes import router as classes_router
from app.api.events import router as events_router
from app.api.ideas import router as ideas_router
from app.api.important_dates import router as important_dates_router
from app.api.work_items import router as work_items_router
from app.api.workouts import router as workouts_router
from app.core.config import settings
from app.core.constants import API_PREFIX
from app.core.errors import OrganizerError
from app.db import Base, engine
from app.models.school import SchoolClass, WorkItem, ImportantDate  # noqa: F401  (import ensures table is registered)
from app.models.idea import Idea  # noqa: F401
from app.models.event import Event  # noqa: F401
from app.models.workout import Workout, Exercise  # noqa: F401
from app.models.bike import BikeIdea, BikeEvent  # noqa: F401


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="Organizer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup
Base.metadata.create_all(bind=engine)
log.info("database ready (%s)", engine.url.get_backend_name())

for r in (
    classes_router,
    work_items_router,
    important_dates_router,
    ideas_router,
    events_router,
    workouts_router,
    bike_router,
):
    app.include_router(r, prefix=API_PREFIX)


# ================== ERRORS ==================
@app.exception_handler(OrganizerError)
def organizer_error_handler(request: Request, exc: OrganizerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.detail},
    )


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies are a 400, same shape as domain validation errors
    return JSONResponse(
        status_code=400,
        content={"error": "validation_error", "detail": jsonable_encoder(exc.errors())},
    )


# ================== HEALTH + STATIC SPA ==================
@app.get(f"{API_PREFIX}/health")
def health():
    return {"ok": True}


@app.get("/{full_path:path}", include_in_schema=False)
def spa(full_path: str):
    """Serve the built single-page app; unknown non-API paths get index.html."""
    if full_path == API_PREFIX.strip("/") or full_path.startswith(API_PREFIX.lstrip("/") + "/"):
        return JSONResponse(status_code=404, content={"detail": "Not Found"})

    dist_dir = os.path.abspath(settings.static_dir)
    if full_path:
        candidate = os.path.abspath(os.path.join(dist_dir, full_path))
        # stay inside dist_dir
        if candidate.startswith(dist_dir + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)

    index_file = os.path.join(dist_dir, "index.html")
    if os.path.isfile(index_file):
        return FileResponse(index_file)
    return PlainTextResponse("index.html not found", status_code=404)


def run():
    import uvicorn

    log.info("listening on http://%s:%s (static: %s)", settings.host, settings.port, settings.static_dir)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
