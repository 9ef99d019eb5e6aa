"""Request Routing — pure mapping from (method, path) to an Operation.

Invariants:
    - Rules evaluated in order, first match wins
    - The last rule matches everything: unknown method/path reads all tasks
    - OPTIONS wins over every other rule, with or without an id
    - The id is exactly one non-empty segment after the route prefix, else None

Design Decisions:
    - Explicit ordered tuple of (predicate, operation) over if/elif: every rule
      visible in one place, order is the policy
    - Path template compiled per prefix and cached: prefix comes from settings
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from restful_tasks.core.domain_types import HttpMethod, Operation, TaskId


@dataclass(frozen=True)
class RouteFacts:
    """Routing facts extracted from one inbound request."""
    method: str
    task_id: TaskId | None


@dataclass(frozen=True)
class RouteRule:
    """One row of the routing table."""
    name: str
    matches: Callable[[RouteFacts], bool]
    operation: Operation


def _is(method: HttpMethod) -> Callable[[RouteFacts], bool]:
    return lambda facts: facts.method == method.value


def _with_id(method: HttpMethod) -> Callable[[RouteFacts], bool]:
    return lambda facts: bool(facts.task_id) and facts.method == method.value


ROUTE_TABLE: tuple[RouteRule, ...] = (
    RouteRule("preflight", _is(HttpMethod.OPTIONS), Operation.PREFLIGHT),
    RouteRule("get_one", _with_id(HttpMethod.GET), Operation.GET_TASK),
    RouteRule("update", _with_id(HttpMethod.PUT), Operation.UPDATE_TASK),
    RouteRule("delete", _with_id(HttpMethod.DELETE), Operation.DELETE_TASK),
    RouteRule("create", _is(HttpMethod.POST), Operation.CREATE_TASK),
    RouteRule("get_all", _is(HttpMethod.GET), Operation.GET_ALL_TASKS),
    RouteRule("fallback", lambda facts: True, Operation.GET_ALL_TASKS),
)


def resolve_operation(facts: RouteFacts) -> Operation:
    """Walk the routing table and return the first matching operation."""
    for rule in ROUTE_TABLE:
        if rule.matches(facts):
            return rule.operation
    # unreachable: the fallback rule always matches
    return Operation.GET_ALL_TASKS


@lru_cache(maxsize=8)
def _task_path_pattern(prefix: str) -> re.Pattern[str]:
    normalized = "/" + prefix.strip("/") if prefix.strip("/") else ""
    return re.compile(rf"^{re.escape(normalized)}/(?P<id>[^/]+)$")


def extract_task_id(path: str, prefix: str = "/tasks") -> TaskId | None:
    """Match path against '<prefix>/{id}'. Returns None when it does not match."""
    match = _task_path_pattern(prefix).match(path)
    if not match:
        return None
    return TaskId(match.group("id"))


def route_request(method: str, path: str, prefix: str = "/tasks") -> tuple[Operation, TaskId | None]:
    """Extract the id and resolve the operation in one step."""
    task_id = extract_task_id(path, prefix)
    return resolve_operation(RouteFacts(method=method, task_id=task_id)), task_id
