"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the opaque store-assigned id as text (never parsed)
    - HttpMethod and Operation encode every valid value as an Enum

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", str)


# ─── Enums ───────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """Methods the router gives meaning to; anything else falls through."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class Operation(str, Enum):
    """What a request resolves to: one store call, or the preflight."""
    PREFLIGHT = "preflight"
    GET_TASK = "get_task"
    GET_ALL_TASKS = "get_all_tasks"
    CREATE_TASK = "create_task"
    UPDATE_TASK = "update_task"
    DELETE_TASK = "delete_task"


# Methods whose body carries a task envelope
BODY_METHODS = frozenset({HttpMethod.POST.value, HttpMethod.PUT.value})
