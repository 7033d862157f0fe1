"""Fulfilment Warehousing FastAPI application.

Processes warehouse lifecycle commands synchronously via HTTP. Each request
under a warehousing prefix is wrapped in the warehousing domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from warehousing.domain import warehousing
from warehousing.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay from domain.toml is applied:
#   - "test"       → in-memory providers
#   - "production" → PostgreSQL via DATABASE_URL
configure_logging()
warehousing.init()

_DOMAIN_PREFIXES = ("/warehouses", "/locations")


def _in_domain(path: str) -> bool:
    return path.startswith(_DOMAIN_PREFIXES)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Fulfilment Warehousing API",
    description="Warehouse lifecycle — creation, replacement, and archival",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the warehousing domain context for domain requests."""
    if _in_domain(request.url.path):
        with warehousing.domain_context():
            response = await call_next(request)
        return response
    # Outside the domain prefixes: health check and docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers and error handling
# ---------------------------------------------------------------------------
from warehousing.api import location_router, register_error_handlers, warehouse_router  # noqa: E402

app.include_router(warehouse_router)
app.include_router(location_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"warehousing": {"name": warehousing.name}},
        }
    )
