"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Every field has a default matching the demo deployment
(port 3002, a single trusted front‑end at ``http://localhost:3000``), so
the server runs without any environment at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "REST API with Socket.io")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv(
        "API_DESCRIPTION", "Documentation for the REST API and Socket.io server"
    )
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # The only origin allowed to call the API from a browser.  Requests
    # from any other origin are refused before routing (see
    # ``core.middleware``).  Credentials (cookies) are allowed for it.
    cors_origin: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
