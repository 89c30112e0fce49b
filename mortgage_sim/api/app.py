"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_sim.api.routes import comparison, simulation
from mortgage_sim.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Mortgage Simulator",
    description="French amortization simulator with prepayments, refinancing and ITF",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(simulation.router)
app.include_router(comparison.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
