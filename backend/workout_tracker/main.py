# workout_tracker/main.py
import time
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from workout_tracker import db as db_module
from workout_tracker.deps.context import RequestContext, get_request_context
from workout_tracker.errors import ConflictError, NotFoundError, UnknownExerciseError
from workout_tracker.migrations import run_migrations
from workout_tracker.routers.exercises import router as exercises_router
from workout_tracker.routers.workouts import router as workouts_router
from workout_tracker.routers.sets import router as sets_router
from workout_tracker.routers.statistics import router as statistics_router
from workout_tracker.routers.static import mount_frontend
from workout_tracker.settings import Settings, get_settings

log = logging.getLogger("workout_tracker")


def _context(request: Request) -> RequestContext:
    return getattr(request.state, "context", None) or RequestContext.from_request(request)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    db_module.configure(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.RUN_MIGRATIONS:
            run_migrations(settings.DATABASE_URL)
        yield
        # uvicorn has drained in-flight requests by now
        db_module.engine.dispose()
        log.info("Database connections released.")

    app = FastAPI(
        title="Workout Tracker API",
        version=settings.API_VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "exercises", "description": "Exercise catalog"},
            {"name": "workouts", "description": "Workout sessions and their sets"},
            {"name": "sets", "description": "Single exercise sets"},
            {"name": "statistics", "description": "Aggregates over all workouts"},
        ],
    )

    # CORS (relax for local dev; tighten origins in prod via env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        ctx = RequestContext.from_request(request)
        request.state.context = ctx
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = ctx.request_id
        log.info("rid=%s %s %s params=%s -> %s size=%s in %.1fms",
                 ctx.request_id, ctx.method, ctx.path, ctx.url_params,
                 response.status_code, response.headers.get("content-length", "-"), duration_ms,
                 extra={**ctx.fields(), "status": response.status_code, "duration_ms": duration_ms})
        return response

    # Error mapping; details stay in the server log.
    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        _context(request).logger().warning("invalid request: %s", exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "invalid request"})

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "not found"})

    @app.exception_handler(ConflictError)
    async def conflict(request: Request, exc: ConflictError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    @app.exception_handler(UnknownExerciseError)
    async def unknown_exercise(request: Request, exc: UnknownExerciseError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "exercise does not exist"})

    @app.exception_handler(SQLAlchemyError)
    async def store_failure(request: Request, exc: SQLAlchemyError):
        _context(request).logger().error("store failure", exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "internal server error"})

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    def healthz():
        # Quick DB sanity check
        try:
            with db_module.SessionLocal() as session:
                session.execute(text("SELECT 1"))
            return {"status": "ok"}
        except Exception as e:
            return {"status": "degraded", "error": str(e)}

    @app.get("/version")
    def version():
        return {"version": settings.API_VERSION}

    # Routers; every API route records its URL params on the request context
    api = APIRouter(prefix="/api", dependencies=[Depends(get_request_context)])
    api.include_router(exercises_router)
    api.include_router(workouts_router)
    api.include_router(sets_router)
    api.include_router(statistics_router)
    app.include_router(api)

    if settings.STATIC_FILES_DIR:
        mount_frontend(app, settings.STATIC_FILES_DIR)

    return app


app = create_app()
