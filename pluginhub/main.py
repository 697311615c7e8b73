import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pluginhub.config import settings
from pluginhub.routers import child_apps, health
from pluginhub.db.database import init_db, close_db
from pluginhub.dependencies import get_system_plugin_registry
from pluginhub.domain.errors import (
    InvalidIdentifierError,
    NotFoundError,
    UnauthorizedError,
    VersionNotFoundError,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Plugin Hub API",
    description="Resolves child apps (plugins, tools, tool sets, sub-apps) for workflow editing and execution",
    version=settings.VERSION,
)

@app.on_event("startup")
async def startup_event():
    logging.basicConfig(level=settings.LOG_LEVEL)
    await init_db()
    registry = get_system_plugin_registry()
    logger.info(f"Plugin Hub started with {len(registry)} system plugins")

@app.on_event("shutdown")
async def shutdown_event():
    await close_db()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


# Domain error handlers
@app.exception_handler(InvalidIdentifierError)
async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    return JSONResponse(status_code=403, content={"detail": str(exc)})


@app.exception_handler(VersionNotFoundError)
async def version_not_found_handler(request: Request, exc: VersionNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

# Include routers
app.include_router(health.router, tags=["Health"])  # Health check endpoints first
app.include_router(child_apps.router, tags=["Child Apps"])

@app.get("/")
async def root():
    return {"message": "Welcome to Plugin Hub API. See /docs for API documentation"}
