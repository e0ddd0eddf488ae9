"""
FastAPI app entry point aggregating per-domain routers under campusmart/routes.
Keep as `uvicorn campusmart.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI

from . import __version__
from .db import get_engine
from .logs import setup_logging


app = FastAPI(title="campusmart-api", version=__version__)


@app.on_event("startup")
def on_startup():
    setup_logging()
    # open (and create or upgrade) the store before the first request
    get_engine().open()


from .routes import base as base_routes
from .routes import accounts as accounts_routes
from .routes import listings as listings_routes

app.include_router(base_routes.router)
app.include_router(accounts_routes.router)
app.include_router(listings_routes.router)
