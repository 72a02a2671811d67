"""eCardShop FastAPI application.

Serves the ordering API synchronously over HTTP. Requests under ``/api`` run
inside the ordering domain context with request details bound to the log
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from catalogue.loading import get_catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from ordering.utils.logging import add_context, clear_context

ordering.init()

# A broken catalogue file stops startup here.
get_catalogue()

_DOMAIN_PREFIX = "/api"

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="eCardShop API",
    description="Store catalogue lookups, customer reconciliation and order placement",
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
    """Push the ordering domain context and bind request details for logging."""
    if not request.url.path.startswith(_DOMAIN_PREFIX):
        # Health check, docs, etc.
        return await call_next(request)

    add_context(
        request_id=request.headers.get("x-request-id") or str(uuid.uuid4()),
        method=request.method,
        path=request.url.path,
    )
    try:
        with ordering.domain_context():
            response = await call_next(request)
        return response
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ordering.api.routes import router as ordering_router  # noqa: E402

app.include_router(ordering_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"ordering": {"name": ordering.name}},
            "stores": len(get_catalogue().stores),
        }
    )
