# api_service/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api_service.auth import auth_router
from api_service.celery_app import configure_celery
from api_service.config import Settings, get_settings
from api_service.database import create_engine_from_settings, create_session_factory, init_db
from api_service.errors import register_error_handlers
from api_service.questions import router as questions_router
from api_service.security import TokenVerifier

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db(app.state.engine)
    logger.info("Database tables ready")
    yield
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Question Board API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = create_engine_from_settings(settings)
    app.state.async_session = create_session_factory(app.state.engine)
    app.state.token_verifier = TokenVerifier(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    app.state.celery_app = configure_celery(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(auth_router, tags=["auth"])
    app.include_router(questions_router)
    return app


def run():
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
