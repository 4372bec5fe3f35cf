# storefront/main.py
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from storefront.api.routers import auth, carts, health, products
from storefront.data.database import Database
from storefront.utils.logging import configure_logging, get_logger
from storefront.utils.settings import DATABASE_URL, HOST, LOG_LEVEL, PORT, SEED_ON_STARTUP

logger = get_logger(__name__)


def create_app(database_url: str | None = None, seed: bool = SEED_ON_STARTUP) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(database_url or DATABASE_URL).open(seed=seed)
        app.state.database = database
        logger.info(f"Storefront started ({database.url.render_as_string(hide_password=True)})")
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid payload on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": "Invalid payload"})

    @app.exception_handler(SQLAlchemyError)
    async def persistence_failure(request: Request, exc: SQLAlchemyError):
        logger.error(f"Persistence failure on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(auth.router)

    return app


configure_logging(LOG_LEVEL)
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
