"""
Users & Posts Backend API Server
Core functionality: in-memory Users and Posts collections with CRUD routes
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS
from database.store import init_stores, close_stores
from api.routes import health, users, posts
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    init_stores()
    yield
    close_stores()

# FastAPI app initialization
app = FastAPI(
    title="Users & Posts Backend",
    description="In-memory CRUD API for users and their posts",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(posts.router, prefix="/posts", tags=["Posts"])

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
