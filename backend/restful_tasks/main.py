"""RESTful Tasks API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The task router owns error conversion: every failure becomes 400 {"error": msg}
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No CORSMiddleware: the task router writes the fixed CORS header set itself
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from restful_tasks.api.routes import tasks
from restful_tasks.config import get_settings
from restful_tasks.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    if not settings.supabase_url:
        logger.warning("SUPABASE_URL is not set; every store call will fail")
    logger.info("RESTful Tasks API started")
    yield
    logger.info("RESTful Tasks API shutting down")
    logging.root.removeHandler(handler)


app = FastAPI(
    title="RESTful Tasks API", version="1.0.0", lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
)

# Routes: explicit registration. One Starlette route matches every path and method.
app.add_route(
    tasks.TASK_ROUTE_PATH, tasks.handle_task_request, include_in_schema=False,
)
app.state.task_store_factory = tasks.build_task_store
