"""FastAPI application factory"""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from src.api.error import ClientError, client_error_handler
from src.api.routes import dkp, raids

logger = logging.getLogger(__name__)


def _init_sentry(config):
    import sentry_sdk

    sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)
    logger.info(f"Sentry enabled for environment {config.SENTRY_ENVIRONMENT}")


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.ENABLE_SENTRY:
        _init_sentry(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from src.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="Guild DKP Ledger", version="0.1.0", lifespan=lifespan)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
            start = time.time()
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"[{request_id}] {request.method} {request.url.path} raised {e}")
                raise
            elapsed_ms = int((time.time() - start) * 1000)
            response.headers["X-Request-Id"] = request_id
            logger.info(
                f"[{request_id}] {request.method} {request.url.path} "
                f"-> {response.status_code} in {elapsed_ms}ms"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)

    app.include_router(raids.router, prefix=config.API_PREFIX)
    app.include_router(dkp.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
