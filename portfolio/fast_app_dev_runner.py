"""
Development ASGI entry point for the portfolio application.

This script performs the following steps:
1. Builds application dependencies via AppDependencyBuilder.
2. Creates the FastAPI application instance with all controllers/services injected,
   keeping the interactive API docs enabled.
3. Runs the application using Uvicorn ASGI server on the port given by PORT.
"""

import os

import uvicorn

from portfolio.common.environment_constants import PORT
from portfolio.utils.app_dependency_builder import AppDependencyBuilder

DEFAULT_PORT = 5001

# Build application dependencies
builder = AppDependencyBuilder()

# Create FastAPI app with injected dependencies
app = builder.fast_app_factory.create_app()

# Run the ASGI server (development mode)
if __name__ == "__main__":
    uvicorn.run(
        "portfolio.fast_app_dev_runner:app",
        host="0.0.0.0",
        port=int(os.getenv(PORT, DEFAULT_PORT)),
        reload=True,
    )
