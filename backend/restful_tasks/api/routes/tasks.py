"""Task Router — single entry point mapping every method and path onto a task operation.

Invariants:
    - Every path and every method is accepted; unmatched ones read all tasks
    - OPTIONS returns 200, empty body, CORS headers: no store built, no body parse
    - The id is matched on the raw (still percent-encoded) request path
    - Bodies parsed only for POST and PUT, with or without an id
    - Every exception caught once here, logged, and returned as 400 {"error": msg}
    - Every response carries the fixed CORS headers

Design Decisions:
    - Plain Starlette route without a methods list: FastAPI routes answer
      unlisted verbs with 405 before the fallback rule can see them
    - Store built per request, after the preflight branch, through the factory on
      app.state: forwards the caller's Authorization, and tests swap the factory
    - Fixed CORS headers over CORSMiddleware: the header set must be identical on
      preflight, success and error responses
"""

import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from restful_tasks.config import Settings, get_settings
from restful_tasks.core.cors import CORS_HEADERS, json_headers
from restful_tasks.core.domain_types import BODY_METHODS, Operation
from restful_tasks.core.errors import BodyParseError, error_payload
from restful_tasks.core.repository_protocols import Row, TaskStore
from restful_tasks.core.routing import route_request
from restful_tasks.infrastructure.observability import request_failure_extra
from restful_tasks.infrastructure.store_client import StoreClient
from restful_tasks.infrastructure.task_repository import StoreTaskRepository
from restful_tasks.schemas.task import TaskEnvelope
from restful_tasks.services.task_operations import TaskOperations

logger = logging.getLogger(__name__)

TASK_ROUTE_PATH = "/{full_path:path}"

TaskStoreFactory = Callable[[Request, Settings], TaskStore]


def build_task_store(request: Request, settings: Settings) -> TaskStore:
    """Default factory: per-request store bound to the caller's credentials."""
    client = StoreClient(
        settings.supabase_url,
        settings.supabase_anon_key,
        authorization=request.headers.get("Authorization", ""),
        timeout=settings.store_timeout_seconds,
    )
    return StoreTaskRepository(client, table=settings.tasks_table)


def _store_factory(request: Request) -> TaskStoreFactory:
    return getattr(request.app.state, "task_store_factory", build_task_store)


def raw_request_path(request: Request) -> str:
    """Path as sent on the wire, so an encoded '/' stays inside the id segment."""
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.split(b"?", 1)[0].decode("latin-1")


async def read_task_body(request: Request) -> Row:
    """Decode the body as {"task": {...}} and return the task fields."""
    raw = await request.body()
    try:
        envelope = TaskEnvelope.model_validate_json(raw)
    except ValidationError as e:
        raise BodyParseError(_describe_validation_error(e)) from e
    return envelope.task.model_dump()


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


async def handle_task_request(request: Request) -> Response:
    """Route one request to its task operation and shape the response."""
    settings = get_settings()
    method = request.method
    path = raw_request_path(request)
    operation, task_id = route_request(method, path, settings.tasks_route_prefix)

    if operation is Operation.PREFLIGHT:
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    try:
        store = _store_factory(request)(request, settings)
        task = await read_task_body(request) if method in BODY_METHODS else None
        payload = await TaskOperations(store).execute(operation, task_id, task)
    except Exception as e:
        logger.error(
            f"Task request failed: {e}",
            exc_info=True,
            extra=request_failure_extra(method, path, task_id, operation.value, e),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload(e),
            headers=json_headers(),
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK, content=payload, headers=json_headers(),
    )
