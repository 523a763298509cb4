# /app/main.py

from pathlib import Path

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    cards_router,
    content_router,
    contact_router,
    proxy_router
)

# --- Database Imports for Startup Logic ---
from .db.database import init_db

STATIC_DIR = Path(__file__).resolve().parent / "static"

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    init_db()
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Card Promo Content Generator API",
    description="Searches credit cards and generates promotional text variations for them.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
# Also answers the CORS preflight for browsers calling the generate-content function directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# --- API Router Inclusion ---
app.include_router(cards_router.router, prefix="/api/cards", tags=["Cards"])
app.include_router(content_router.router, prefix="/api/content", tags=["Content"])
app.include_router(contact_router.router, prefix="/api/contact", tags=["Contact"])

# The content proxy keeps the path its browser callers already use.
app.include_router(proxy_router.router, prefix="/functions", tags=["Content Proxy"])

# --- Presentation Layer ---
app.mount("/app", StaticFiles(directory=STATIC_DIR, html=True), name="app")

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Card Promo backend is running!", "version": app.version}
