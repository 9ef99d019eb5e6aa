"""Boundary Protocols — contracts between the task services and the store client.

Invariants:
    - Services NEVER import the concrete store client: dependency arrows point inward
    - Every store call returns the row list or raises StoreError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do network IO
"""

from typing import Any, Protocol

from restful_tasks.core.domain_types import TaskId


Row = dict[str, Any]


class TaskStore(Protocol):
    """Contract for task persistence: implemented by infrastructure/task_repository.py."""
    async def select_all(self) -> list[Row]: ...
    async def select_by_id(self, task_id: TaskId) -> list[Row]: ...
    async def insert(self, task: Row) -> None: ...
    async def update(self, task_id: TaskId, task: Row) -> None: ...
    async def delete(self, task_id: TaskId) -> None: ...
