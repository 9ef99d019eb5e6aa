"""Request Routing — verifies the ordered routing table and id extraction.

Tests:
    - OPTIONS wins regardless of id
    - id-bearing GET/PUT/DELETE map to single-task operations
    - POST creates with or without id
    - Everything else falls back to reading all tasks
    - id is exactly one non-empty segment after the prefix
"""

import pytest

from restful_tasks.core.domain_types import Operation
from restful_tasks.core.routing import (
    ROUTE_TABLE, RouteFacts, extract_task_id, resolve_operation, route_request,
)


@pytest.mark.parametrize("method,task_id,expected", [
    ("OPTIONS", None, Operation.PREFLIGHT),
    ("OPTIONS", "1", Operation.PREFLIGHT),
    ("GET", "1", Operation.GET_TASK),
    ("PUT", "1", Operation.UPDATE_TASK),
    ("DELETE", "1", Operation.DELETE_TASK),
    ("POST", None, Operation.CREATE_TASK),
    ("POST", "1", Operation.CREATE_TASK),
    ("GET", None, Operation.GET_ALL_TASKS),
    ("PUT", None, Operation.GET_ALL_TASKS),
    ("DELETE", None, Operation.GET_ALL_TASKS),
    ("PATCH", "1", Operation.GET_ALL_TASKS),
    ("HEAD", None, Operation.GET_ALL_TASKS),
    ("get", "1", Operation.GET_ALL_TASKS),
])
def test_resolve_operation(method, task_id, expected):
    assert resolve_operation(RouteFacts(method=method, task_id=task_id)) is expected


def test_empty_id_counts_as_no_id():
    assert resolve_operation(RouteFacts("GET", "")) is Operation.GET_ALL_TASKS


def test_route_table_starts_with_preflight_and_ends_with_fallback():
    assert ROUTE_TABLE[0].operation is Operation.PREFLIGHT
    assert ROUTE_TABLE[-1].name == "fallback"
    assert ROUTE_TABLE[-1].matches(RouteFacts("TRACE", None))


@pytest.mark.parametrize("path,expected", [
    ("/tasks/42", "42"),
    ("/tasks/4f1c-uuid", "4f1c-uuid"),
    ("/tasks", None),
    ("/tasks/", None),
    ("/tasks/42/", None),
    ("/tasks/42/extra", None),
    ("/other/42", None),
    ("/prefix/tasks/42", None),
    ("/", None),
])
def test_extract_task_id(path, expected):
    assert extract_task_id(path) == expected


def test_extract_task_id_with_custom_prefix():
    assert extract_task_id("/restful-tasks/7", "/restful-tasks") == "7"
    assert extract_task_id("/restful-tasks/7", "restful-tasks/") == "7"
    assert extract_task_id("/tasks/7", "/restful-tasks") is None


def test_extract_task_id_with_root_prefix():
    assert extract_task_id("/7", "/") == "7"


def test_route_request_combines_both_steps():
    assert route_request("DELETE", "/tasks/9") == (Operation.DELETE_TASK, "9")
    assert route_request("DELETE", "/tasks") == (Operation.GET_ALL_TASKS, None)
