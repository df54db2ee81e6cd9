"""Storefront FastAPI application.

Serves the product catalogue and cart checkout under ``/api`` and, when a
front-end directory is configured, the static browser client at ``/``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
    python src/server.py
"""

from datetime import UTC, datetime
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from catalogue.api import product_router
from ordering.api import cart_router, order_router
from settings import Settings
from shared.error_handlers import register_exception_handlers
from shared.logging import add_context, clear_context, configure_logging, get_logger
from storefront import Storefront

logger = get_logger(__name__)

API_PREFIX = "/api"


def create_app(settings: Settings | None = None, storefront: Storefront | None = None) -> FastAPI:
    """Build the application around one Storefront.

    Tests pass their own ``settings`` and ``storefront``; the server runner
    lets both come from the environment.
    """
    settings = settings or Settings.from_env()
    configure_logging(level=settings.log_level, log_dir=settings.log_dir, env=settings.env)

    app = FastAPI(
        title="Storefront API",
        description="In-memory product catalogue and cart checkout",
    )
    app.state.settings = settings
    app.state.storefront = storefront or Storefront.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind request details to every log line emitted while handling it."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response

    register_exception_handlers(app)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(cart_router, prefix=API_PREFIX)
    app.include_router(order_router, prefix=API_PREFIX)

    @app.get(f"{API_PREFIX}/health")
    async def health():
        return JSONResponse(
            content={
                "status": "OK",
                "message": "Servidor funcionando correctamente",
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    # Mounted last so the API routes take precedence over static files.
    if settings.serves_frontend:
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
    elif settings.frontend_dir is not None:
        logger.warning("frontend.missing", frontend_dir=str(settings.frontend_dir))

    logger.info(
        "app.created",
        env=settings.env,
        products=len(app.state.storefront.catalogue),
        frontend=settings.serves_frontend,
    )
    return app


app = create_app()
