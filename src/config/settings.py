"""
Configuration settings for the Users & Posts backend
"""

import os
import logging

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "DEV")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))

# Client side talks to a fixed local address; override per ApiClient / --base-url only
DEFAULT_API_BASE_URL = "http://localhost:3000"

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

logger.info(f"Environment: {ENV}")
logger.debug(f"Allowed origins: {ALLOWED_ORIGINS}")
