"""
ankore API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from ankore.server.routes import cards, lookup


logger = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            logger.info("%-8s %-30s → %s", methods, route.path, route.name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_routes(app)
    yield


app = FastAPI(title="ankore API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lookup.router)
app.include_router(cards.router)


@app.get("/")
async def root():
    return {"name": "ankore API", "version": "0.1.0"}
