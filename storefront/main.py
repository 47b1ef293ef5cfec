# storefront/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.routers import carts, checkout, contact, health, orders, products
from storefront.data.database import init_db, make_engine, make_session_factory
from storefront.services.payment_client import PaymentClient
from storefront.services.relay_client import RelayClient
from storefront.utils.logging import get_logger
from storefront.utils.settings import CORS_ORIGINS, HOST, PORT, SEED_CATALOG

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI):
    """Every error leaves the API as {"error": message}."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def handle_db_error(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(
    engine: Engine | None = None,
    session_factory: sessionmaker | None = None,
    payment_client: PaymentClient | None = None,
    relay_client: RelayClient | None = None,
    seed: bool = SEED_CATALOG,
) -> FastAPI:
    owns_engine = engine is None
    engine = engine or make_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine, seed=seed)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.engine = engine
    app.state.session_factory = session_factory or make_session_factory(engine)
    app.state.payment_client = payment_client or PaymentClient()
    app.state.relay_client = relay_client or RelayClient()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(checkout.router)
    app.include_router(orders.router)
    app.include_router(contact.router)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host=HOST, port=PORT)
