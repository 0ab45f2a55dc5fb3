# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Teams API
=========
Group-scoped rosters, events and shirt sets, plus the one-shot import of
exports from the old local-storage client.

Import flow:
    POST /api/groups                      -> create the target group
    POST /api/groups/{groupId}/import     -> replay the export into it
    GET  /api/groups/{groupId}/members    -> verify

Port: 3001
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from teams_api.controllers import group_controller, import_controller, system_controller
from teams_api.core.config import settings
from teams_api.core.database import engine, init_schema
from teams_api.core.dependencies import get_allocator
from teams_api.core.logging import get_logger
from teams_api.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        init_schema(engine)
        if settings.BOOTSTRAP_SEQUENCES:
            created = get_allocator().bootstrap()
            logger.info("Sequence bootstrap done, created=%s", created)
    except Exception:
        logger.warning("Could not prepare schema — DB may not be ready yet", exc_info=True)
    yield
    engine.dispose()
    logger.info("Shutting down — connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Teams API",
    description="Group-scoped rosters, events and legacy data import.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception %s %s", request.method, request.url.path,
                     extra={"request_id": getattr(request.state, "request_id", None)})
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(group_controller.router)
app.include_router(import_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
