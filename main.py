# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member Service
==============
Hosts the member registry: an in-memory member repository and the service
that rejects duplicate names, wired together by constructor injection in
member_registry.core.dependencies. Only operational endpoints are exposed.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from member_registry.controllers.system_controller import router as system_router
from member_registry.core.config import settings
from member_registry.core.dependencies import get_member_repo
from member_registry.core.logging import get_logger
from member_registry.middleware import RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log wiring on startup and store size on shutdown."""
    member_repo = get_member_repo()
    logger.info("Member service starting — repository=%s", type(member_repo).__name__)
    yield
    logger.info("Member service shutting down — %d members in store", member_repo.count())


app = FastAPI(
    title="Member Service",
    description="In-memory member registry with unique member names.",
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
app.add_middleware(RequestIDMiddleware)

app.include_router(system_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level=settings.LOG_LEVEL.lower())
