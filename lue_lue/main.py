import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lue_lue.config import settings
from lue_lue.database import engine
from lue_lue.errors import ApplicationError

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.MIGRATE_ON_STARTUP:
        from lue_lue.migrate import upgrade
        await upgrade(engine, "head")
    yield
    await engine.dispose()


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        log.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(title="lue-lue backend", version="0.1.0", lifespan=lifespan)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApplicationError, application_error_handler)

    # Routers
    from lue_lue.api.game import router as game_router
    from lue_lue.api.chat import router as chat_router
    from lue_lue.api.player import router as player_router
    from lue_lue.api.card import router as card_router
    from lue_lue.api.claim import router as claim_router
    from lue_lue.api.status import router as status_router

    app.include_router(game_router)
    app.include_router(chat_router)
    app.include_router(player_router)
    app.include_router(card_router)
    app.include_router(claim_router)
    app.include_router(status_router)

    @app.get("/")
    async def root():
        return {"status": "ok", "game": "lue-lue"}

    return app


app = create_app()
