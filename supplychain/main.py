"""
Supply Chain Dashboard API
REST backend for the dashboard: suppliers, orders, inventory, statistics and
the workflow graph editor, all served from an in-memory store.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from supplychain.config import Settings, settings as default_settings
from supplychain.errors import error_body, register_exception_handlers
from supplychain.routers import inventory, orders, statistics, suppliers, workflows
from supplychain.services.store import SupplyChainStore
from supplychain.util.ids import new_id

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_store(settings: Settings) -> SupplyChainStore:
    options = {
        "enforce_unique_keys": settings.enforce_unique_keys,
        "strict_edge_endpoints": settings.strict_edge_endpoints,
    }
    if settings.seed_data:
        return SupplyChainStore.seeded(**options)
    return SupplyChainStore(**options)


def create_app(settings: Optional[Settings] = None, store: Optional[SupplyChainStore] = None) -> FastAPI:
    """
    Build the API around one store.

    The store lives on ``app.state`` for the lifetime of the app; pass one in
    to share or inspect it (tests build a fresh store per app).
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Supply Chain Dashboard API",
        version="1.0.0",
        description="Suppliers, orders, inventory and workflow graph for the supply-chain dashboard",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    prefix = settings.api_prefix
    app.include_router(statistics.router, prefix=prefix, tags=["statistics"])
    app.include_router(suppliers.router, prefix=prefix, tags=["suppliers"])
    app.include_router(orders.router, prefix=prefix, tags=["orders"])
    app.include_router(inventory.router, prefix=prefix, tags=["inventory"])
    app.include_router(workflows.router, prefix=prefix, tags=["workflow"])

    @app.get(f"{prefix}/health", tags=["health"])
    def health(request: Request):
        return {
            "status": "ok",
            "environment": settings.app_env,
            "counts": request.app.state.store.counts(),
        }

    @app.middleware("http")
    async def add_request_id_header(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or new_id("req_")
        try:
            resp: Response = await call_next(request)
        except Exception:
            # 500 built here still gets the request id and CORS headers
            logger.exception("Unhandled error on %s %s [%s]", request.method, request.url.path, request_id)
            resp = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body("Internal server error"),
            )
        resp.headers["X-Request-Id"] = request_id
        logger.info("%s %s %s [%s]", request.method, request.url.path, resp.status_code, request_id)
        return resp

    # outermost: wraps the request-id middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: configure logging and serve a freshly built app with uvicorn."""
    logging.basicConfig(level=default_settings.log_level.upper(), format=LOG_FORMAT)
    uvicorn.run(
        "supplychain.main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
